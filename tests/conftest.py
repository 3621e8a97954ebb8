import os
import sys

import pytest

# Ensure tests can import top-level modules when pytest changes CWD.
REPO_ROOT = os.path.dirname(os.path.dirname(__file__))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

from symbols import SESSION, SymbolTable


@pytest.fixture
def symbols():
    """A fresh, empty symbol table."""
    return SymbolTable()


@pytest.fixture(autouse=True)
def _clean_session():
    # The session table is process-wide; keep tests from seeing each other.
    SESSION.clear()
    yield
    SESSION.clear()
