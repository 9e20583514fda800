"""Pytest configuration.

Run pytest from this project's root; pythonpath in pyproject.toml puts src/
and the project root on sys.path so tests can import ``tests.unit`` helpers.
"""

import pytest

from codestyle_linter.infrastructure.di.container import CodestyleContainer


@pytest.fixture(autouse=True)
def _fresh_container():
    """Each test starts without a cached container."""
    CodestyleContainer.reset()
    yield
    CodestyleContainer.reset()
