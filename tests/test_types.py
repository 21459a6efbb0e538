from my_types import BOOL, INT, LIST, REAL, UNDEFINED, type_from_name


def test_declared_type_names_map_to_types():
	assert type_from_name("int") == INT
	assert type_from_name("bool") == BOOL
	assert type_from_name("float") == REAL
	assert type_from_name("list") == LIST


def test_unknown_type_name_is_undefined():
	assert type_from_name("string") == UNDEFINED
	assert type_from_name(None) == UNDEFINED


def test_int_and_real_are_distinct():
	assert INT != REAL
	assert INT.conflicts_with(REAL)


def test_undefined_never_conflicts():
	for t in (INT, REAL, BOOL, LIST, UNDEFINED):
		assert not UNDEFINED.conflicts_with(t)
		assert not t.conflicts_with(UNDEFINED)


def test_numeric_helpers():
	assert INT.is_numeric() and REAL.is_numeric()
	assert not BOOL.is_numeric()
	assert UNDEFINED.is_numeric_or_undefined()
	assert not LIST.is_numeric_or_undefined()
