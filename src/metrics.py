from dataclasses import dataclass
from typing import Dict


@dataclass
class Metrics:
    """遍历过程中累积的结构计数"""
    declarations: int = 0
    while_loops: int = 0
    if_count: int = 0   # if 语句与三元表达式
    op_count: int = 0

    def report(self) -> str:
        return f"{{VAR:{self.declarations}, WHILE:{self.while_loops}, IF:{self.if_count}, OP:{self.op_count}}}"

    def as_dict(self) -> Dict[str, int]:
        return {
            'declarations': self.declarations,
            'whileLoops': self.while_loops,
            'ifAndTernaryCount': self.if_count,
            'operatorCount': self.op_count,
        }
