"""Test listener interface and the listeners shipped with the runtime."""

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Dict, List, Optional

from .types import TestCase, TestResult, TestSuiteResult, TestSummary

if TYPE_CHECKING:
    from .suites.base import TestSuite


class TestListener(ABC):
    """
    Receives lifecycle notifications while suites run.

    Case notifications are sent by TestSuite.run. Suite notifications are
    sent by the runner and default to no-ops.
    """

    __test__ = False

    @abstractmethod
    def on_start(self, case: TestCase) -> None:
        """A non-ignored case is about to run."""
        pass

    @abstractmethod
    def on_ignore(self, case: TestCase) -> None:
        """A case was skipped because it, or its suite, is ignored."""
        pass

    @abstractmethod
    def on_pass(self, case: TestCase, duration_ms: int) -> None:
        """A case finished without raising."""
        pass

    @abstractmethod
    def on_fail(self, case: TestCase, error: BaseException, duration_ms: int) -> None:
        """A case body or one of its per-case hooks raised."""
        pass

    def on_suite_start(self, suite: "TestSuite") -> None:
        pass

    def on_suite_end(self, suite: "TestSuite", duration_ms: int) -> None:
        pass

    def on_suite_ignore(self, suite: "TestSuite") -> None:
        pass

    def on_suite_error(self, suite: "TestSuite", error: BaseException) -> None:
        pass


class CompositeListener(TestListener):
    """Forwards every notification to each listener in order."""

    def __init__(self, *listeners: TestListener) -> None:
        self.listeners: List[TestListener] = list(listeners)

    def on_start(self, case: TestCase) -> None:
        for listener in self.listeners:
            listener.on_start(case)

    def on_ignore(self, case: TestCase) -> None:
        for listener in self.listeners:
            listener.on_ignore(case)

    def on_pass(self, case: TestCase, duration_ms: int) -> None:
        for listener in self.listeners:
            listener.on_pass(case, duration_ms)

    def on_fail(self, case: TestCase, error: BaseException, duration_ms: int) -> None:
        for listener in self.listeners:
            listener.on_fail(case, error, duration_ms)

    def on_suite_start(self, suite: "TestSuite") -> None:
        for listener in self.listeners:
            listener.on_suite_start(suite)

    def on_suite_end(self, suite: "TestSuite", duration_ms: int) -> None:
        for listener in self.listeners:
            listener.on_suite_end(suite, duration_ms)

    def on_suite_ignore(self, suite: "TestSuite") -> None:
        for listener in self.listeners:
            listener.on_suite_ignore(suite)

    def on_suite_error(self, suite: "TestSuite", error: BaseException) -> None:
        for listener in self.listeners:
            listener.on_suite_error(suite, error)


class LoggingListener(TestListener):
    """Logs every notification."""

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger(__name__)

    def on_start(self, case: TestCase) -> None:
        self.logger.debug("Starting %s", case)

    def on_ignore(self, case: TestCase) -> None:
        self.logger.info("Ignored %s", case)

    def on_pass(self, case: TestCase, duration_ms: int) -> None:
        self.logger.info("Passed %s (%dms)", case, duration_ms)

    def on_fail(self, case: TestCase, error: BaseException, duration_ms: int) -> None:
        self.logger.warning(
            "Failed %s (%dms): %s",
            case,
            duration_ms,
            error,
            exc_info=(type(error), error, error.__traceback__),
        )

    def on_suite_start(self, suite: "TestSuite") -> None:
        self.logger.info("Running test suite: %s (%d tests)", suite, suite.size)

    def on_suite_end(self, suite: "TestSuite", duration_ms: int) -> None:
        self.logger.info("Finished test suite: %s (%dms)", suite, duration_ms)

    def on_suite_ignore(self, suite: "TestSuite") -> None:
        self.logger.info("Ignored test suite: %s", suite)

    def on_suite_error(self, suite: "TestSuite", error: BaseException) -> None:
        self.logger.error(
            "Test suite %s aborted: %s",
            suite,
            error,
            exc_info=(type(error), error, error.__traceback__),
        )


class RecordingListener(TestListener):
    """Collects notifications into TestSuiteResult objects."""

    def __init__(self) -> None:
        self.summary = TestSummary()
        self._by_name: Dict[str, TestSuiteResult] = {}

    def _suite_result(self, name: str) -> TestSuiteResult:
        result = self._by_name.get(name)
        if result is None:
            result = TestSuiteResult(name=name)
            self._by_name[name] = result
            self.summary.add_suite(result)
        return result

    def _record(self, case: TestCase, result: TestResult) -> None:
        self._suite_result(case.suite.name).results.append(result)

    def on_start(self, case: TestCase) -> None:
        self._suite_result(case.suite.name)

    def on_ignore(self, case: TestCase) -> None:
        self._record(case, TestResult(name=case.name, passed=False, duration_ms=0, ignored=True))

    def on_pass(self, case: TestCase, duration_ms: int) -> None:
        self._record(case, TestResult(name=case.name, passed=True, duration_ms=duration_ms))

    def on_fail(self, case: TestCase, error: BaseException, duration_ms: int) -> None:
        self._record(
            case,
            TestResult(
                name=case.name,
                passed=False,
                duration_ms=duration_ms,
                message=str(error) or type(error).__name__,
                error=error,
            ),
        )

    def on_suite_start(self, suite: "TestSuite") -> None:
        self._suite_result(suite.name)

    def on_suite_end(self, suite: "TestSuite", duration_ms: int) -> None:
        self._suite_result(suite.name).duration_ms = duration_ms

    def on_suite_ignore(self, suite: "TestSuite") -> None:
        self._suite_result(suite.name).ignored = True

    def on_suite_error(self, suite: "TestSuite", error: BaseException) -> None:
        self._suite_result(suite.name).error = error

    def get_suite(self, name: str) -> Optional[TestSuiteResult]:
        return self._by_name.get(name)
