from ply import yacc

from ast_nodes import *
from lexer import lexer, tokens

start = 'program'


def _chain(cls, chain):
    """(operands, ops) 只有一个操作数时直接返回该操作数"""
    operands, ops = chain
    if len(operands) == 1:
        return operands[0]
    return cls(operands, ops)


# ==================== 程序结构 ====================

def p_program(p):
    "program : stmt_list"
    p[0] = Program(p[1])

def p_stmt_list_multi(p):
    "stmt_list : stmt_list stmt"
    p[0] = p[1] + [p[2]]

def p_stmt_list_empty(p):
    "stmt_list : "
    p[0] = []

def p_stmt_simple(p):
    """stmt : declare_stmt ';'
            | assign_stmt ';'
            | do_while_stmt ';'"""
    p[0] = p[1]

def p_stmt_compound(p):
    """stmt : if_stmt
            | while_stmt"""
    p[0] = p[1]

def p_stmt_block(p):
    "stmt : block"
    p[0] = Block(p[1])

def p_stmt_expr(p):
    "stmt : expr ';'"
    p[0] = ExprStmt(p[1])

# ==================== 语句规则 ====================

def p_declare_no_init(p):
    "declare_stmt : type_name IDENT"
    p[0] = DeclareStmt(p[1], Ident(p[2], binding=True))

def p_declare_with_init(p):
    "declare_stmt : type_name IDENT '=' expr"
    p[0] = DeclareStmt(p[1], Ident(p[2], binding=True), p[4])

def p_type_name(p):
    """type_name : TYPE
                 | IDENT"""
    p[0] = p[1]

def p_assign(p):
    "assign_stmt : IDENT '=' expr"
    p[0] = AssignStmt(Ident(p[1]), p[3])

def p_if_stmt(p):
    "if_stmt : IF '(' expr ')' block"
    p[0] = IfStmt(p[3], p[5])

def p_if_else(p):
    "if_stmt : IF '(' expr ')' block ELSE block"
    p[0] = IfStmt(p[3], p[5], p[7])

def p_if_else_if(p):
    "if_stmt : IF '(' expr ')' block ELSE if_stmt"
    p[0] = IfStmt(p[3], p[5], [p[7]])

def p_while_stmt(p):
    "while_stmt : WHILE '(' expr ')' block"
    p[0] = WhileStmt(p[3], p[5])

def p_do_while_stmt(p):
    "do_while_stmt : DO block WHILE '(' expr ')'"
    p[0] = DoWhileStmt(p[2], p[5])

def p_block(p):
    "block : '{' stmt_list '}'"
    p[0] = p[2]

# ==================== 表达式规则 ====================
# 优先级由低到高：三元 < || < && < 比较 < 加减 < 乘除 < 一元

def p_expr_ternary(p):
    "expr : log_or '?' expr ':' expr"
    p[0] = Ternary(p[1], p[3], p[5])

def p_expr_log_or(p):
    "expr : log_or"
    p[0] = p[1]

def p_log_or(p):
    "log_or : or_chain"
    p[0] = _chain(LogExpr, p[1])

def p_or_chain_multi(p):
    "or_chain : or_chain OR log_and"
    p[0] = (p[1][0] + [p[3]], p[1][1] + [p[2]])

def p_or_chain_single(p):
    "or_chain : log_and"
    p[0] = ([p[1]], [])

def p_log_and(p):
    "log_and : and_chain"
    p[0] = _chain(LogExpr, p[1])

def p_and_chain_multi(p):
    "and_chain : and_chain AND comparison"
    p[0] = (p[1][0] + [p[3]], p[1][1] + [p[2]])

def p_and_chain_single(p):
    "and_chain : comparison"
    p[0] = ([p[1]], [])

def p_comparison(p):
    """comparison : additive LT additive
                  | additive GT additive
                  | additive LE additive
                  | additive GE additive
                  | additive EQ additive
                  | additive NE additive"""
    p[0] = CompExpr([p[1], p[3]], p[2])

def p_comparison_single(p):
    "comparison : additive"
    p[0] = p[1]

def p_additive(p):
    "additive : add_chain"
    p[0] = _chain(AddExpr, p[1])

def p_add_chain_multi(p):
    """add_chain : add_chain PLUS term
                 | add_chain MINUS term"""
    p[0] = (p[1][0] + [p[3]], p[1][1] + [p[2]])

def p_add_chain_single(p):
    "add_chain : term"
    p[0] = ([p[1]], [])

def p_term(p):
    "term : mul_chain"
    p[0] = _chain(MulExpr, p[1])

def p_mul_chain_multi(p):
    """mul_chain : mul_chain TIMES unary
                 | mul_chain DIV unary
                 | mul_chain MOD unary"""
    p[0] = (p[1][0] + [p[3]], p[1][1] + [p[2]])

def p_mul_chain_single(p):
    "mul_chain : unary"
    p[0] = ([p[1]], [])

def p_unary_neg(p):
    "unary : MINUS unary"
    p[0] = UnaryOp('-', p[2])

def p_unary_not(p):
    "unary : NOT unary"
    p[0] = UnaryOp('!', p[2])

def p_unary_primary(p):
    "unary : primary"
    p[0] = p[1]

# ==================== 基础 Primary 规则 ====================

def p_primary_int(p):
    "primary : INT"
    p[0] = IntLiteral(p[1])

def p_primary_float(p):
    "primary : FLOAT"
    p[0] = RealLiteral(p[1])

def p_primary_true(p):
    "primary : TRUE"
    p[0] = BoolLiteral(True)

def p_primary_false(p):
    "primary : FALSE"
    p[0] = BoolLiteral(False)

def p_primary_ident(p):
    "primary : IDENT"
    p[0] = Ident(p[1])

def p_primary_paren(p):
    "primary : '(' expr ')'"
    p[0] = p[2]

def p_primary_list(p):
    "primary : '[' expr_list ']'"
    p[0] = ListLiteral(p[2])

def p_primary_list_empty(p):
    "primary : '[' ']'"
    p[0] = ListLiteral([])

def p_expr_list_multi(p):
    "expr_list : expr_list ',' expr"
    p[0] = p[1] + [p[3]]

def p_expr_list_single(p):
    "expr_list : expr"
    p[0] = [p[1]]

def p_error(p):
    if p:
        raise SyntaxError(f"Syntax error at '{p.value}' (type: {p.type}) on line {p.lineno}")
    raise SyntaxError("Syntax error at EOF")


_parser = None


def parse(data, debug=False):
    global _parser
    if _parser is None:
        _parser = yacc.yacc(debug=debug, write_tables=False)
    lexer.lineno = 1
    return _parser.parse(data, lexer=lexer)
