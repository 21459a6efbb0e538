import io
from typing import Any

# 从 ast_nodes 导入所有节点类型
from ast_nodes import *


class ASTPrinter:
    """
    带注释的AST打印机
    支持：
    - 类型推导信息显示 (_type)
    - 彩色输出（可选）
    """

    def __init__(self, show_types=True, use_colors=False, indent_size=2):
        self.show_types = show_types
        self.use_colors = use_colors
        self.indent_size = indent_size
        self.output = io.StringIO()

        # 颜色代码
        if use_colors:
            self.colors = {
                'type': '\033[36m',  # 青色 - 类型信息
                'node': '\033[33m',  # 黄色 - 节点名/运算符
                'value': '\033[32m',  # 绿色 - 值
                'reset': '\033[0m'
            }
        else:
            self.colors = {k: '' for k in ['type', 'node', 'value', 'reset']}

    def print(self, node: Any) -> str:
        """打印AST并返回字符串"""
        self.output = io.StringIO()
        self._visit(node, 0)
        return self.output.getvalue()

    def _write(self, text: str):
        self.output.write(text)

    def _indent(self, level: int):
        self._write(" " * (level * self.indent_size))

    def _color(self, text: str, color: str) -> str:
        return f"{self.colors[color]}{text}{self.colors['reset']}"

    def _get_type_annotation(self, node: Any) -> str:
        """获取节点的类型注释"""
        if not self.show_types:
            return ""
        type_info = getattr(node, '_type', None)
        if type_info:
            return self._color(f" /* : {type_info} */", 'type')
        return ""

    def _visit(self, node: Any, depth: int):
        """访问节点"""
        if node is None:
            self._write("null")
            return

        # 根据节点类型分发
        method_name = f'_visit_{node.__class__.__name__}'
        visitor = getattr(self, method_name, self._visit_generic)
        visitor(node, depth)

    def _visit_generic(self, node: Any, depth: int):
        self._write(self._color(repr(node), 'value'))

    # ---------- 语句 ----------

    def _visit_Program(self, node: Program, depth: int):
        self._write(self._color("Program", 'node'))
        self._write(" {\n")
        for stmt in node.stmts:
            self._visit_stmt(stmt, depth + 1)
        self._indent(depth)
        self._write("}")

    def _visit_stmt(self, stmt: Any, depth: int):
        self._indent(depth)
        self._visit(stmt, depth)
        self._write("\n")

    def _visit_body(self, stmts, depth: int):
        self._write("{\n")
        for stmt in stmts:
            self._visit_stmt(stmt, depth + 1)
        self._indent(depth)
        self._write("}")

    def _visit_DeclareStmt(self, node: DeclareStmt, depth: int):
        type_ann = ""
        if self.show_types and hasattr(node, '_type'):
            type_ann = self._color(f"/* {node._type} */ ", 'type')
        self._write(f"{type_ann}{node.type_name} {node.target.name}")
        if node.init is not None:
            self._write(" = ")
            self._visit(node.init, depth)
        self._write(";")

    def _visit_AssignStmt(self, node: AssignStmt, depth: int):
        self._visit(node.target, depth)
        self._write(" = ")
        self._visit(node.expr, depth)
        self._write(";")

    def _visit_ExprStmt(self, node: ExprStmt, depth: int):
        self._visit(node.expr, depth)
        self._write(";")

    def _visit_Block(self, node: Block, depth: int):
        self._visit_body(node.stmts, depth)

    def _visit_IfStmt(self, node: IfStmt, depth: int):
        self._write(self._color("if", 'node'))
        self._write(" (")
        self._visit(node.cond, depth)
        self._write(") ")
        self._visit_body(node.then_block, depth)
        if node.else_block is not None:
            self._write(self._color(" else ", 'node'))
            self._visit_body(node.else_block, depth)

    def _visit_WhileStmt(self, node: WhileStmt, depth: int):
        self._write(self._color("while", 'node'))
        self._write(" (")
        self._visit(node.cond, depth)
        self._write(") ")
        self._visit_body(node.block, depth)

    def _visit_DoWhileStmt(self, node: DoWhileStmt, depth: int):
        self._write(self._color("do ", 'node'))
        self._visit_body(node.block, depth)
        self._write(self._color(" while", 'node'))
        self._write(" (")
        self._visit(node.cond, depth)
        self._write(");")

    # ---------- 表达式 ----------

    def _visit_chain(self, node: Any, depth: int):
        self._write("(")
        for i, operand in enumerate(node.operands):
            if i > 0:
                self._write(f" {self._color(node.ops[i - 1], 'node')} ")
            self._visit(operand, depth)
        self._write(")")
        self._write(self._get_type_annotation(node))

    _visit_AddExpr = _visit_chain
    _visit_MulExpr = _visit_chain
    _visit_LogExpr = _visit_chain

    def _visit_CompExpr(self, node: CompExpr, depth: int):
        if len(node.operands) == 1:
            self._visit(node.operands[0], depth)
            return
        self._write("(")
        self._visit(node.operands[0], depth)
        self._write(f" {self._color(node.op, 'node')} ")
        self._visit(node.operands[1], depth)
        self._write(")")
        self._write(self._get_type_annotation(node))

    def _visit_UnaryOp(self, node: UnaryOp, depth: int):
        self._write(self._color(node.op, 'node'))
        self._visit(node.operand, depth)
        self._write(self._get_type_annotation(node))

    def _visit_Ternary(self, node: Ternary, depth: int):
        self._write("(")
        self._visit(node.cond, depth)
        self._write(" ? ")
        self._visit(node.then, depth)
        self._write(" : ")
        self._visit(node.orelse, depth)
        self._write(")")
        self._write(self._get_type_annotation(node))

    def _visit_ListLiteral(self, node: ListLiteral, depth: int):
        self._write("[")
        for i, item in enumerate(node.items):
            if i > 0:
                self._write(", ")
            self._visit(item, depth)
        self._write("]")
        self._write(self._get_type_annotation(node))

    def _visit_Ident(self, node: Ident, depth: int):
        self._write(self._color(node.name, 'value'))
        self._write(self._get_type_annotation(node))

    def _visit_literal(self, node: Any, depth: int):
        value = node.value
        if isinstance(value, bool):
            value = 'true' if value else 'false'
        self._write(self._color(str(value), 'value'))
        self._write(self._get_type_annotation(node))

    _visit_IntLiteral = _visit_literal
    _visit_RealLiteral = _visit_literal
    _visit_BoolLiteral = _visit_literal


def print_ast(node: Any, show_types: bool = True, use_colors: bool = False) -> str:
    """
    便捷的AST打印函数

    用法:
        from visitors import print_ast
        print(print_ast(program))
    """
    printer = ASTPrinter(show_types=show_types, use_colors=use_colors)
    return printer.print(node)
