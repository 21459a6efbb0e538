from metrics import Metrics


def test_report_format():
	m = Metrics(declarations=3, while_loops=1, if_count=2, op_count=7)
	assert m.report() == "{VAR:3, WHILE:1, IF:2, OP:7}"


def test_empty_report():
	assert Metrics().report() == "{VAR:0, WHILE:0, IF:0, OP:0}"


def test_as_dict_keys():
	assert Metrics(op_count=4).as_dict() == {
		"declarations": 0,
		"whileLoops": 0,
		"ifAndTernaryCount": 0,
		"operatorCount": 4,
	}
