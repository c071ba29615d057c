"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
"""

from tests.conftest import FakeConfigStore, run_cmd

__all__ = ["FakeConfigStore", "run_cmd"]
