import os
import sys
from glob import glob
from typing import List

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

import pytest  # noqa: E402

from tests.test_util import ROOT, open_file  # noqa: E402


@pytest.fixture(scope="session")
def functions_program() -> str:
    return open_file("data/valid/functions.js")


@pytest.fixture(scope="session")
def members_program() -> str:
    return open_file("data/valid/members.js")


def valid_files() -> List[str]:
    return sorted(glob(str(ROOT / "data/valid/*.js")))


def parser_error_files() -> List[str]:
    return sorted(glob(str(ROOT / "data/parserError/ParseError_*.js")))


@pytest.fixture(scope="session", params=valid_files())
def valid_file(request) -> str:
    return request.param


@pytest.fixture(scope="session", params=parser_error_files())
def parser_error(request) -> str:
    return request.param
