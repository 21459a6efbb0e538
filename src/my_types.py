from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TypeDesc:
    """
    类型描述符：
    - kind: 'undefined', 'int', 'real', 'bool', 'list'
    - 'undefined' 只来自无法识别的类型名，作为通配符使用
    """
    kind: str

    def __repr__(self):
        return self.kind

    def __str__(self):
        return self.kind

    def is_defined(self) -> bool:
        return self.kind != 'undefined'

    def is_numeric(self) -> bool:
        return self.kind in ('int', 'real')

    def is_numeric_or_undefined(self) -> bool:
        return self.is_numeric() or not self.is_defined()

    def conflicts_with(self, other: 'TypeDesc') -> bool:
        """两边都已知且不相同时才算冲突"""
        return self.is_defined() and other.is_defined() and self != other


# 基础类型常量
UNDEFINED = TypeDesc('undefined')
INT = TypeDesc('int')
REAL = TypeDesc('real')
BOOL = TypeDesc('bool')
LIST = TypeDesc('list')

# 声明语句中的类型名
TYPE_NAMES = {
    'int': INT,
    'bool': BOOL,
    'float': REAL,
    'list': LIST,
}


def type_from_name(name: Optional[str]) -> TypeDesc:
    """未知类型名不报错，返回 UNDEFINED"""
    if name is None:
        return UNDEFINED
    return TYPE_NAMES.get(name, UNDEFINED)
