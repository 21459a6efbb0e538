import pytest

from errors import SemanticError
from my_types import BOOL, INT
from scope import ScopeTable


def test_declare_then_lookup():
	table = ScopeTable()
	table.declare("a", INT)
	assert table.lookup("a") == INT
	assert "a" in table


def test_redeclaration_fails_even_with_same_type():
	table = ScopeTable()
	table.declare("a", INT)
	with pytest.raises(SemanticError) as exc:
		table.declare("a", INT)
	assert exc.value.kind == "MultipleDeclaration"
	assert exc.value.message == "Identifier a has multiple declarations"


def test_lookup_missing_name_fails():
	with pytest.raises(SemanticError) as exc:
		ScopeTable().lookup("x")
	assert exc.value.kind == "UndeclaredVariable"
	assert str(exc.value) == "Variable x was not declared"


def test_block_copy_is_independent():
	outer = ScopeTable()
	outer.declare("a", INT)
	inner = outer.enter_block()
	inner.declare("b", BOOL)

	assert inner.lookup("a") == INT
	assert "b" not in outer
	outer.declare("c", INT)
	assert "c" not in inner


def test_block_copy_inherits_outer_bindings_for_redeclaration():
	outer = ScopeTable()
	outer.declare("a", INT)
	with pytest.raises(SemanticError) as exc:
		outer.enter_block().declare("a", BOOL)
	assert exc.value.kind == "MultipleDeclaration"


def test_block_depth_is_tracked():
	inner = ScopeTable().enter_block().enter_block()
	assert inner.info.scope_type == "block"
	assert inner.info.describe() == "block@2"
