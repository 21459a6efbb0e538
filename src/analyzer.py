from typing import Optional

from ast_nodes import *
from errors import (
    SemanticError,
    invalid_assignation_type,
    invalid_type_in_condition,
    invalid_type_in_expression,
    undeclared_variable,
)
from metrics import Metrics
from my_types import *
from scope import ScopeTable

COMPARISON_OPS = ('<', '>', '<=', '>=')
EQUALITY_OPS = ('==', '!=')


class ExpressionAnalyzer:
    """表达式分析 - 被 SemanticAnalyzer 组合使用

    scope 由调用方传入：不同代码块使用各自的符号表副本。
    """

    def __init__(self, metrics: Metrics):
        self.metrics = metrics

    def analyze(self, expr, scope: ScopeTable) -> TypeDesc:
        """表达式分析主入口"""
        method_name = f'_analyze_{expr.__class__.__name__}'
        method = getattr(self, method_name, self._analyze_generic)
        result = method(expr, scope)
        expr._type = result  # 保存类型到节点
        return result

    def _analyze_generic(self, expr, scope: ScopeTable) -> TypeDesc:
        raise SemanticError(f"未知的表达式类型: {type(expr).__name__}", 'UnknownNode')

    def _analyze_IntLiteral(self, expr: IntLiteral, _) -> TypeDesc:
        return INT

    def _analyze_RealLiteral(self, expr: RealLiteral, _) -> TypeDesc:
        return REAL

    def _analyze_BoolLiteral(self, expr: BoolLiteral, _) -> TypeDesc:
        return BOOL

    def _analyze_ListLiteral(self, expr: ListLiteral, scope: ScopeTable) -> TypeDesc:
        # 元素类型只在字面量内部检查，结果统一为 list
        if not expr.items:
            return LIST

        first_type = self.analyze(expr.items[0], scope)
        for item in expr.items[1:]:
            if first_type.conflicts_with(self.analyze(item, scope)):
                raise invalid_type_in_expression()
        return LIST

    def _analyze_Ident(self, expr: Ident, scope: ScopeTable) -> TypeDesc:
        if not expr.binding and expr.name not in scope:
            raise undeclared_variable(expr.name)
        t = scope.get(expr.name)
        return t if t is not None else UNDEFINED

    def _analyze_UnaryOp(self, expr: UnaryOp, scope: ScopeTable) -> TypeDesc:
        self.metrics.op_count += 1
        operand_type = self.analyze(expr.operand, scope)

        if expr.op == '-':
            if not operand_type.is_numeric_or_undefined():
                raise invalid_type_in_expression()
            return operand_type
        elif expr.op == '!':
            if operand_type.is_defined() and operand_type != BOOL:
                raise invalid_type_in_expression()
            return BOOL
        raise SemanticError(f"未知的一元操作符: {expr.op}", 'UnknownNode')

    def _analyze_arith_chain(self, expr, scope: ScopeTable) -> TypeDesc:
        """加法链 / 乘法链共用：以第一个操作数的类型为准"""
        self.metrics.op_count += len(expr.operands) - 1

        first_type = self.analyze(expr.operands[0], scope)
        if not first_type.is_numeric_or_undefined():
            raise invalid_type_in_expression()

        for operand in expr.operands[1:]:
            if first_type.conflicts_with(self.analyze(operand, scope)):
                raise invalid_type_in_expression()
        return first_type

    def _analyze_AddExpr(self, expr: AddExpr, scope: ScopeTable) -> TypeDesc:
        return self._analyze_arith_chain(expr, scope)

    def _analyze_MulExpr(self, expr: MulExpr, scope: ScopeTable) -> TypeDesc:
        return self._analyze_arith_chain(expr, scope)

    def _analyze_LogExpr(self, expr: LogExpr, scope: ScopeTable) -> TypeDesc:
        # 逻辑运算不放过 undefined
        self.metrics.op_count += len(expr.operands) - 1
        for operand in expr.operands:
            if self.analyze(operand, scope) != BOOL:
                raise invalid_type_in_expression()
        return BOOL

    def _analyze_CompExpr(self, expr: CompExpr, scope: ScopeTable) -> TypeDesc:
        if len(expr.operands) == 1:
            return self.analyze(expr.operands[0], scope)

        left_type = self.analyze(expr.operands[0], scope)
        right_type = self.analyze(expr.operands[1], scope)
        if not (left_type.is_defined() and right_type.is_defined()):
            raise invalid_type_in_expression()

        self.metrics.op_count += 1
        if expr.op in COMPARISON_OPS:
            if not (left_type.is_numeric() and right_type.is_numeric()):
                raise invalid_type_in_expression()
        elif expr.op in EQUALITY_OPS:
            if left_type != right_type:
                raise invalid_type_in_expression()
        else:
            raise SemanticError(f"未知的比较运算符: {expr.op}", 'UnknownNode')
        return BOOL

    def _analyze_Ternary(self, expr: Ternary, scope: ScopeTable) -> TypeDesc:
        self.metrics.if_count += 1
        if self.analyze(expr.cond, scope) != BOOL:
            raise invalid_type_in_condition()

        then_type = self.analyze(expr.then, scope)
        else_type = self.analyze(expr.orelse, scope)
        if then_type.conflicts_with(else_type):
            raise invalid_type_in_expression()
        return then_type if then_type.is_defined() else else_type


class SemanticAnalyzer:
    """
    语义分析器主类
    单遍深度优先遍历，遇到第一个错误即抛出 SemanticError
    """

    def __init__(self):
        self.metrics = Metrics()
        self.scope: Optional[ScopeTable] = None
        self.expr_analyzer = ExpressionAnalyzer(self.metrics)

    def analyze(self, program: Program) -> Metrics:
        """
        主分析入口
        成功时返回本次遍历的计数；失败时抛出异常，不产生任何计数
        """
        self.metrics = Metrics()
        self.expr_analyzer = ExpressionAnalyzer(self.metrics)
        self.scope = ScopeTable()

        for stmt in program.stmts:
            self._analyze_stmt(stmt, self.scope)

        return self.metrics

    def _analyze_stmt(self, stmt, scope: ScopeTable):
        """语句分析分发"""
        method_name = f'_analyze_{stmt.__class__.__name__}'
        method = getattr(self, method_name, None)
        if method is None:
            raise SemanticError(f"未知的语句类型: {type(stmt).__name__}", 'UnknownNode')
        method(stmt, scope)

    def _analyze_block(self, stmts, scope: ScopeTable):
        """在符号表副本中分析代码块，块结束后副本直接丢弃"""
        local = scope.enter_block()
        for s in stmts:
            self._analyze_stmt(s, local)

    def _check_condition(self, cond, scope: ScopeTable):
        if self.expr_analyzer.analyze(cond, scope) != BOOL:
            raise invalid_type_in_condition()

    def _analyze_DeclareStmt(self, node: DeclareStmt, scope: ScopeTable):
        """变量声明分析：先绑定变量名，再检查初始值"""
        name = node.target.name
        declared_type = type_from_name(node.type_name)
        scope.declare(name, declared_type)
        self.metrics.declarations += 1

        node.target.binding = True
        self.expr_analyzer.analyze(node.target, scope)

        if node.init is not None:
            init_type = self.expr_analyzer.analyze(node.init, scope)
            if init_type.is_defined() and init_type != declared_type:
                raise invalid_assignation_type(name)
        node._type = declared_type

    def _analyze_AssignStmt(self, node: AssignStmt, scope: ScopeTable):
        """赋值语句分析"""
        name = node.target.name
        target_type = scope.lookup(name)
        node.target._type = target_type

        expr_type = self.expr_analyzer.analyze(node.expr, scope)
        if expr_type.is_defined() and expr_type != target_type:
            raise invalid_assignation_type(name)

    def _analyze_ExprStmt(self, node: ExprStmt, scope: ScopeTable):
        self.expr_analyzer.analyze(node.expr, scope)

    def _analyze_Block(self, node: Block, scope: ScopeTable):
        self._analyze_block(node.stmts, scope)

    def _analyze_IfStmt(self, node: IfStmt, scope: ScopeTable):
        """If 语句分析"""
        self.metrics.if_count += 1
        self._check_condition(node.cond, scope)

        self._analyze_block(node.then_block, scope)
        if node.else_block is not None:
            self._analyze_block(node.else_block, scope)

    def _analyze_WhileStmt(self, node: WhileStmt, scope: ScopeTable):
        """While 循环分析"""
        self.metrics.while_loops += 1
        self._check_condition(node.cond, scope)
        self._analyze_block(node.block, scope)

    def _analyze_DoWhileStmt(self, node: DoWhileStmt, scope: ScopeTable):
        """Do-while 循环：先分析循环体，再检查条件"""
        self.metrics.while_loops += 1
        self._analyze_block(node.block, scope)
        self._check_condition(node.cond, scope)
