class SemanticError(Exception):
    """语义错误 - 遇到第一个错误即终止整个分析

    kind 取值见下方常量，message 为对外输出的错误文本。
    """

    def __init__(self, message: str, kind: str):
        super().__init__(message)
        self.message = message
        self.kind = kind

    def __repr__(self):
        return f"SemanticError({self.kind}: {self.message})"


UNDECLARED_VARIABLE = 'UndeclaredVariable'
MULTIPLE_DECLARATION = 'MultipleDeclaration'
INVALID_TYPE_IN_CONDITION = 'InvalidTypeInCondition'
INVALID_TYPE_IN_EXPRESSION = 'InvalidTypeInExpression'
INVALID_ASSIGNATION_TYPE = 'InvalidAssignationType'


def undeclared_variable(name: str) -> SemanticError:
    return SemanticError(f"Variable {name} was not declared", UNDECLARED_VARIABLE)


def multiple_declaration(name: str) -> SemanticError:
    return SemanticError(f"Identifier {name} has multiple declarations", MULTIPLE_DECLARATION)


def invalid_type_in_condition() -> SemanticError:
    return SemanticError("Invalid type in condition", INVALID_TYPE_IN_CONDITION)


def invalid_type_in_expression() -> SemanticError:
    return SemanticError("Invalid type in expression", INVALID_TYPE_IN_EXPRESSION)


def invalid_assignation_type(name: str) -> SemanticError:
    return SemanticError(f"Invalid type in assignation of Identifier {name}", INVALID_ASSIGNATION_TYPE)
