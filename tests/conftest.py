import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from tests.test_util import read_expressions  # isort:skip


@pytest.fixture(scope="session", params=read_expressions("valid.txt"))
def valid_expression(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=read_expressions("lexical_error.txt"))
def lexical_error(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=read_expressions("syntax_error.txt"))
def syntax_error(request) -> str:
    return request.param
