"""
Pytest configuration and fixtures for bf_runtime tests.
"""

import io
import os
import sys

import pytest

# Add grandparent directory to path for imports (to find bf_runtime package)
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))))


HELLO_WORLD = (
    "++++++++[>++++[>++>+++>+++>+<<<<-]>+>+>->>+[<]<-]>>.>---.+++++++..+++.>>.<-.<.+++.------.--------.>>+.>++."
)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "slow: marks tests that execute many interpreter steps (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def hello_world():
    """The classic Hello World program; prints 'Hello World!\\n'."""
    return HELLO_WORLD


@pytest.fixture
def stdout():
    return io.StringIO()


@pytest.fixture
def make_stdin():
    """Build a text stdin from lines of input."""
    def _make(*lines):
        return io.StringIO("".join(lines))
    return _make


@pytest.fixture
def source_file(tmp_path):
    """Write BF source to a temporary file and return its path."""
    def _write(source, name="program.bf"):
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return str(path)
    return _write
