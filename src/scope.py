from dataclasses import dataclass
from typing import Dict, List, Optional

from errors import multiple_declaration, undeclared_variable
from my_types import TypeDesc


@dataclass
class ScopeInfo:
    """作用域信息，用于调试输出"""
    scope_type: str  # 'program', 'block'
    depth: int = 0

    def describe(self) -> str:
        if self.scope_type == 'program':
            return "program"
        return f"block@{self.depth}"


class ScopeTable:
    """符号表 - 变量名到声明类型的映射

    进入代码块时复制整张表，之后父子表互不影响：
    块内新声明的变量在块结束后不可见，块内对外层变量的修改也不会写回。
    """

    def __init__(self, bindings: Optional[Dict[str, TypeDesc]] = None, info: Optional[ScopeInfo] = None):
        self.bindings: Dict[str, TypeDesc] = dict(bindings) if bindings else {}
        self.info = info or ScopeInfo('program')

    def __contains__(self, name: str) -> bool:
        return name in self.bindings

    def __len__(self) -> int:
        return len(self.bindings)

    def __repr__(self):
        return f"ScopeTable({self.info.describe()}, {self.bindings})"

    def declare(self, name: str, t: TypeDesc):
        """声明变量，同一张表内重复声明即报错"""
        if name in self.bindings:
            raise multiple_declaration(name)
        self.bindings[name] = t

    def lookup(self, name: str) -> TypeDesc:
        """查找变量类型"""
        if name not in self.bindings:
            raise undeclared_variable(name)
        return self.bindings[name]

    def get(self, name: str) -> Optional[TypeDesc]:
        return self.bindings.get(name)

    def names(self) -> List[str]:
        return sorted(self.bindings)

    def enter_block(self) -> 'ScopeTable':
        """进入新代码块：返回当前绑定的完整副本"""
        return ScopeTable(self.bindings, ScopeInfo('block', self.info.depth + 1))
