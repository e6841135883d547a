"""Tests for SuiteRegistry."""

import pytest

from suite_runtime import DuplicateSuiteError, SuiteRegistry, TopLevelSuite, UnknownSuiteError


@pytest.fixture
def populated(registry) -> SuiteRegistry:
    for name in ("Math", "Strings", "Slow"):
        TopLevelSuite(name, registry=registry)
    return registry


def test_keeps_registration_order(populated):
    assert populated.names == ["Math", "Strings", "Slow"]
    assert [suite.name for suite in populated] == ["Math", "Strings", "Slow"]
    assert len(populated) == 3


def test_contains_and_get(populated):
    assert "Math" in populated
    assert "Missing" not in populated
    assert populated.get("Missing") is None
    assert populated.get("Strings").name == "Strings"


def test_registering_same_suite_twice_is_noop(registry):
    suite = TopLevelSuite("Math", registry=registry)
    registry.register(suite)

    assert registry.suites == [suite]


def test_different_suite_with_same_name_rejected(registry):
    TopLevelSuite("Math", registry=registry)

    with pytest.raises(DuplicateSuiteError, match="Math"):
        TopLevelSuite("Math", registry=registry)


def test_suite_without_registry_is_not_registered(registry):
    TopLevelSuite("Math")
    assert len(registry) == 0


def test_select_all_by_default(populated):
    assert [s.name for s in populated.select()] == ["Math", "Strings", "Slow"]


def test_select_keeps_registration_order(populated):
    selected = populated.select(["Slow", "Math"])
    assert [s.name for s in selected] == ["Math", "Slow"]


def test_select_with_exclude(populated):
    selected = populated.select(exclude=["Slow"])
    assert [s.name for s in selected] == ["Math", "Strings"]


def test_select_unknown_name(populated):
    with pytest.raises(UnknownSuiteError, match="Nope"):
        populated.select(["Math", "Nope"])


def test_unknown_suite_error_is_key_error(populated):
    with pytest.raises(KeyError):
        populated.select(exclude=["Nope"])
