"""Shared fixtures."""

import pytest

from suite_runtime import SuiteRegistry
from tests.fakes import FakeListener


@pytest.fixture
def registry() -> SuiteRegistry:
    return SuiteRegistry()


@pytest.fixture
def listener() -> FakeListener:
    return FakeListener()
