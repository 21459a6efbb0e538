import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src"))

from analyzer import SemanticAnalyzer


@pytest.fixture
def analyzer():
	return SemanticAnalyzer()
