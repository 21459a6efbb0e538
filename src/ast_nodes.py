from dataclasses import dataclass, field
from typing import List, Optional, Any

@dataclass
class Program:
    stmts: List[Any]
    def __repr__(self): return f"Program({self.stmts})"

@dataclass
class Ident:
    name: str
    binding: bool = False  # 是否为声明语句引入的变量名
    def __repr__(self): return f"Ident({self.name})"

@dataclass
class DeclareStmt:
    type_name: str    # 'int' / 'bool' / 'float' / 'list' 或其它任意名字
    target: Ident
    init: Optional[Any] = None
    def __repr__(self): return f"Declare({self.type_name} {self.target}, init={self.init})"

@dataclass
class AssignStmt:
    target: Ident
    expr: Any
    def __repr__(self): return f"Assign({self.target} = {self.expr})"

@dataclass
class IfStmt:
    cond: Any
    then_block: List[Any]
    else_block: Optional[List[Any]] = None
    def __repr__(self): return f"If({self.cond}, then={self.then_block}, else={self.else_block})"

@dataclass
class WhileStmt:
    cond: Any
    block: List[Any]  # block 是语句列表
    def __repr__(self): return f"While({self.cond}, {self.block})"

@dataclass
class DoWhileStmt:
    block: List[Any]
    cond: Any
    def __repr__(self): return f"DoWhile({self.block}, {self.cond})"

@dataclass
class Block:
    stmts: List[Any]
    def __repr__(self): return f"Block({self.stmts})"

@dataclass
class ExprStmt:
    expr: Any
    def __repr__(self): return f"ExprStmt({self.expr})"

# Expressions
@dataclass
class IntLiteral:
    value: int
    def __repr__(self): return f"Int({self.value})"

@dataclass
class RealLiteral:
    value: float
    def __repr__(self): return f"Real({self.value})"

@dataclass
class BoolLiteral:
    value: bool
    def __repr__(self): return f"Bool({self.value})"

@dataclass
class ListLiteral:
    items: List[Any] = field(default_factory=list)
    def __repr__(self): return f"List({self.items})"

@dataclass
class UnaryOp:
    op: str           # '-' 取负 或 '!' 逻辑非
    operand: Any
    def __repr__(self): return f"UnaryOp({self.op}{self.operand})"

@dataclass
class AddExpr:
    """a + b - c ... 展平为一个节点，ops 比 operands 少一个"""
    operands: List[Any]
    ops: List[str] = field(default_factory=list)
    def __repr__(self): return f"Add({self.operands}, ops={self.ops})"

@dataclass
class MulExpr:
    operands: List[Any]
    ops: List[str] = field(default_factory=list)
    def __repr__(self): return f"Mul({self.operands}, ops={self.ops})"

@dataclass
class LogExpr:
    """&& / || 链"""
    operands: List[Any]
    ops: List[str] = field(default_factory=list)
    def __repr__(self): return f"Log({self.operands}, ops={self.ops})"

@dataclass
class CompExpr:
    """比较表达式：一个操作数时直接透传类型，两个操作数时为比较运算"""
    operands: List[Any]
    op: Optional[str] = None
    def __repr__(self):
        if len(self.operands) == 1:
            return f"Comp({self.operands[0]})"
        return f"Comp({self.operands[0]} {self.op} {self.operands[1]})"

@dataclass
class Ternary:
    cond: Any
    then: Any
    orelse: Any
    def __repr__(self): return f"Ternary({self.cond} ? {self.then} : {self.orelse})"
