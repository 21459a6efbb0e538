from analyzer import SemanticAnalyzer
from parser import parse
from visitors import ASTPrinter, print_ast


def test_print_before_analysis_has_no_types():
	program = parse("int a = 1;")
	assert print_ast(program) == "Program {\n  int a = 1;\n}"


def test_print_statements_and_bodies():
	program = parse("bool b; if (b) { b = false; } else { } do { } while (b);")
	text = print_ast(program, show_types=False)
	assert "if (b) {\n    b = false;\n  } else {\n  }" in text
	assert "do {\n  } while (b);" in text


def test_print_with_types_after_analysis():
	program = parse("float f = -1.5; list l = [f, f];")
	SemanticAnalyzer().analyze(program)
	text = print_ast(program)
	assert "/* real */ float f = -1.5 /* : real */ /* : real */;" in text
	assert "[f /* : real */, f /* : real */] /* : list */" in text


def test_ternary_and_comparison():
	program = parse("int a = 1; bool b = a >= 0 ? true : false;")
	text = print_ast(program, show_types=False)
	assert "bool b = ((a >= 0) ? true : false);" in text


def test_colors():
	printer = ASTPrinter(show_types=False, use_colors=True)
	assert "\033[33m" in printer.print(parse("while (true) { }"))
