"""Tests for TopLevelSuite, the flat-function suite."""

import pytest

from suite_runtime import HookKind, InvalidHookKindError, TopLevelSuite


class Boom(Exception):
    pass


@pytest.fixture
def calls():
    return []


@pytest.fixture
def suite(calls) -> TopLevelSuite:
    suite = TopLevelSuite("Strings")
    suite.register_function(HookKind.BEFORE_EACH, lambda: calls.append("before"))
    suite.register_function(HookKind.AFTER_EACH, lambda: calls.append("after"))
    suite.register_function(HookKind.BEFORE_CLASS, lambda: calls.append("before_class"))
    suite.register_function(HookKind.AFTER_CLASS, lambda: calls.append("after_class"))
    return suite


def test_defaults_to_not_ignored():
    assert TopLevelSuite("Strings").ignored is False


def test_hooks_wrap_each_case(suite, calls, listener):
    suite.register_case("upper", lambda: calls.append("upper"))
    suite.register_case("lower", lambda: calls.append("lower"))

    suite.run(listener)

    assert calls == [
        "before_class",
        "before",
        "upper",
        "after",
        "before",
        "lower",
        "after",
        "after_class",
    ]


def test_after_hooks_run_when_body_raises(suite, calls, listener):
    def body():
        calls.append("body")
        raise Boom("boom")

    suite.register_case("explodes", body)
    suite.register_case("next", lambda: calls.append("next"))

    suite.run(listener)

    assert calls.count("after") == 2
    assert calls.index("after") > calls.index("body")
    assert listener.kinds() == [
        ("start", "explodes"),
        ("fail", "explodes"),
        ("start", "next"),
        ("pass", "next"),
    ]


def test_ignored_case_skips_hooks(suite, calls, listener):
    suite.register_case("skipped", lambda: calls.append("skipped"), ignored=True)

    suite.run(listener)

    assert calls == ["before_class", "after_class"]
    assert listener.events == [("ignore", "skipped")]


def test_same_hook_registered_once(calls):
    suite = TopLevelSuite("Strings")

    def hook():
        calls.append("hook")

    assert suite.register_function(HookKind.BEFORE_EACH, hook) is True
    assert suite.register_function(HookKind.BEFORE_EACH, hook) is False
    assert suite.before == (hook,)


def test_hooks_run_in_registration_order(calls, listener):
    suite = TopLevelSuite("Strings")
    suite.register_function(HookKind.BEFORE_EACH, lambda: calls.append(1))
    suite.register_function(HookKind.BEFORE_EACH, lambda: calls.append(2))
    suite.register_case("case", lambda: calls.append("body"))

    suite.run(listener)

    assert calls == [1, 2, "body"]


def test_rejects_non_hook_kind():
    suite = TopLevelSuite("Strings")
    with pytest.raises(InvalidHookKindError):
        suite.register_function("before_each", lambda: None)


def test_before_class_failure_aborts(calls, listener):
    suite = TopLevelSuite("Strings")

    def broken():
        raise Boom("setup")

    suite.register_function(HookKind.BEFORE_CLASS, broken)
    suite.register_function(HookKind.AFTER_CLASS, lambda: calls.append("after_class"))
    suite.register_case("case", lambda: calls.append("body"))

    with pytest.raises(Boom):
        suite.run(listener)

    assert calls == []
    assert listener.events == []
