import pytest

from source_checker import SourceChecker


@pytest.fixture
def checker():
	return SourceChecker()


def _fails(checker, text, kind):
	result = checker.check_text(text)
	assert not result.ok
	assert result.metrics is None
	assert result.error.kind == kind
	return result


def test_example_a_assignation_type(checker):
	result = _fails(checker, "int a = 1; bool b = true; a = b;", "InvalidAssignationType")
	assert result.output() == "Invalid type in assignation of Identifier a"


def test_example_b_multiple_declaration(checker):
	result = _fails(checker, "int a; int a;", "MultipleDeclaration")
	assert result.output() == "Identifier a has multiple declarations"


def test_example_c_if_condition(checker):
	result = _fails(checker, "if (1) { }", "InvalidTypeInCondition")
	assert result.output() == "Invalid type in condition"


def test_example_d_block_scoped_new_name(checker):
	result = checker.check_text("int a = 1; { bool b = true; } a = 2;")
	assert result.ok
	assert result.output() == "{VAR:2, WHILE:0, IF:0, OP:0}"


def test_example_d_shadowing_outer_name(checker):
	_fails(checker, "int a = 1; { bool a = true; } a = 2;", "MultipleDeclaration")


def test_example_e_heterogeneous_list(checker):
	result = _fails(checker, "[1, 2, true];", "InvalidTypeInExpression")
	assert result.output() == "Invalid type in expression"


def test_example_f_while_condition(checker):
	_fails(checker, "int a = 1; while (a) {}", "InvalidTypeInCondition")


def test_use_after_block_ends(checker):
	_fails(checker, "while (false) { int x = 1; } x = 2;", "UndeclaredVariable")


def test_full_program_metrics(checker):
	text = """
	int a = 1;
	float b = 2.0;
	bool c = a < 3 && !false;
	while (c) { a = a + 1 * 2 - 3; c = false; }
	if (c) { int d; } else { b = -b; }
	do { a = c ? 1 : 2; } while (a == 2);
	"""
	result = checker.check_text(text)
	assert result.ok, result.output()
	assert result.metrics.as_dict() == {
		"declarations": 4,
		"whileLoops": 2,
		"ifAndTernaryCount": 2,
		"operatorCount": 8,
	}
	assert result.output() == "{VAR:4, WHILE:2, IF:2, OP:8}"


def test_unknown_type_name_leniency(checker):
	result = checker.check_text("string s; int a = s + true; a = s;")
	assert result.ok


def test_unknown_type_in_comparison_fails(checker):
	_fails(checker, "string s; bool b = s == s;", "InvalidTypeInExpression")


def test_syntax_error_propagates(checker):
	with pytest.raises(SyntaxError):
		checker.check_text("int a = ;")


def test_show_ast_annotates_types():
	checker = SourceChecker({"show_ast": True})
	result = checker.check_text("int a = 1 + 2;")
	assert "int a = (1 /* : int */ + 2 /* : int */) /* : int */;" in result.ast_dump


def test_check_source_and_write(checker, tmp_path):
	source = tmp_path / "prog.txt"
	source.write_text("bool b = 1 < 2;", encoding="utf-8")
	result = checker.check_source(source)

	out = checker.write(result, tmp_path / "out" / "report.txt")
	assert out.read_text(encoding="utf-8") == "{VAR:1, WHILE:0, IF:0, OP:1}"


def test_write_error_message(checker, tmp_path):
	result = checker.check_text("x = 1;")
	out = checker.write(result, tmp_path / "report.txt")
	assert out.read_text(encoding="utf-8") == "Variable x was not declared"
