"""Shared types for the suite runtime."""

import enum
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Generic, List, Optional, TypeVar

if TYPE_CHECKING:
    from .suites.base import TestSuite

F = TypeVar("F", bound=Callable[..., Any])


class HookKind(enum.Enum):
    """Lifecycle point a hook function is attached to."""

    BEFORE_EACH = "before_each"
    AFTER_EACH = "after_each"
    BEFORE_CLASS = "before_class"
    AFTER_CLASS = "after_class"

    @property
    def is_class_level(self) -> bool:
        return self in CLASS_KINDS


INSTANCE_KINDS = frozenset({HookKind.BEFORE_EACH, HookKind.AFTER_EACH})
CLASS_KINDS = frozenset({HookKind.BEFORE_CLASS, HookKind.AFTER_CLASS})


@dataclass(frozen=True)
class TestCase(Generic[F]):
    """A single named unit of work owned by a suite."""

    __test__ = False

    name: str
    suite: "TestSuite" = field(repr=False, compare=False)
    body: F = field(repr=False)
    ignored: bool = False

    def __str__(self) -> str:
        return f"{self.name} ({self.suite})"


@dataclass(frozen=True)
class CaseOutcome:
    """Result of executing one case body together with its per-case hooks."""

    passed: bool
    duration_ms: int
    error: Optional[BaseException] = None

    @classmethod
    def success(cls, duration_ms: int) -> "CaseOutcome":
        return cls(passed=True, duration_ms=duration_ms)

    @classmethod
    def failure(cls, error: BaseException, duration_ms: int) -> "CaseOutcome":
        return cls(passed=False, duration_ms=duration_ms, error=error)


@dataclass
class TestResult:
    """Result of a single test."""

    __test__ = False

    name: str
    passed: bool
    duration_ms: int
    ignored: bool = False
    message: Optional[str] = None
    error: Optional[BaseException] = field(default=None, repr=False)


@dataclass
class TestSuiteResult:
    """Result of a test suite."""

    __test__ = False

    name: str
    results: List[TestResult] = field(default_factory=list)
    ignored: bool = False
    duration_ms: int = 0
    error: Optional[BaseException] = field(default=None, repr=False)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed(self) -> int:
        return sum(1 for r in self.results if not r.passed and not r.ignored)

    @property
    def skipped(self) -> int:
        return sum(1 for r in self.results if r.ignored)

    @property
    def errored(self) -> bool:
        """True when a class-level hook aborted the suite."""
        return self.error is not None


@dataclass
class TestSummary:
    """Summary of all test results."""

    __test__ = False

    suites: List[TestSuiteResult] = field(default_factory=list)
    duration_ms: int = 0

    @property
    def total(self) -> int:
        return sum(suite.total for suite in self.suites)

    @property
    def passed(self) -> int:
        return sum(suite.passed for suite in self.suites)

    @property
    def failed(self) -> int:
        return sum(suite.failed for suite in self.suites)

    @property
    def skipped(self) -> int:
        return sum(suite.skipped for suite in self.suites)

    @property
    def errored(self) -> int:
        return sum(1 for suite in self.suites if suite.errored)

    @property
    def successful(self) -> bool:
        return self.failed == 0 and self.errored == 0

    def add_suite(self, suite: TestSuiteResult) -> None:
        self.suites.append(suite)

    def get_suite(self, name: str) -> Optional[TestSuiteResult]:
        for suite in self.suites:
            if suite.name == name:
                return suite
        return None
