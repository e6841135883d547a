"""Base test suite interface and the shared run protocol."""

import logging
import time
from abc import ABC, abstractmethod
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Dict, Generic, Mapping, Optional, TypeVar

from ..types import CaseOutcome, TestCase

if TYPE_CHECKING:
    from ..listener import TestListener
    from ..registry import SuiteRegistry

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _now_ms() -> int:
    return int(time.monotonic() * 1000)


class TestSuite(ABC):
    """Base class for test suites."""

    __test__ = False

    @property
    @abstractmethod
    def name(self) -> str:
        """Test suite name."""
        pass

    @property
    @abstractmethod
    def ignored(self) -> bool:
        """Whether the whole suite is skipped."""
        pass

    @property
    @abstractmethod
    def cases(self) -> Mapping[str, TestCase]:
        """Test cases keyed by name, in registration order."""
        pass

    @property
    def size(self) -> int:
        return len(self.cases)

    def __len__(self) -> int:
        return self.size

    def __str__(self) -> str:
        return self.name

    @abstractmethod
    def run(self, listener: "TestListener") -> None:
        """
        Run all tests in this suite.

        Args:
            listener: Receives a notification for every case

        Raises:
            Exception: Whatever a class-level hook raised
        """
        pass


class AbstractTestSuite(TestSuite, Generic[F]):
    """
    Suite engine shared by every binding strategy.

    Subclasses decide how a case body and its hooks are invoked by
    implementing do_test, do_before_class and do_after_class.
    """

    def __init__(
        self,
        name: str,
        ignored: bool = False,
        registry: Optional["SuiteRegistry"] = None,
    ) -> None:
        """
        Initialize the suite.

        Args:
            name: Suite name
            ignored: Skip every case in the suite
            registry: Registry to register this suite into
        """
        self._name = name
        self._ignored = ignored
        self._cases: Dict[str, TestCase[F]] = {}
        if registry is not None:
            registry.register(self)

    @property
    def name(self) -> str:
        return self._name

    @property
    def ignored(self) -> bool:
        return self._ignored

    @property
    def cases(self) -> Mapping[str, TestCase[F]]:
        return MappingProxyType(self._cases)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, size={self.size})"

    def create_case(self, name: str, body: F, ignored: bool = False) -> TestCase[F]:
        return TestCase(name=name, suite=self, body=body, ignored=ignored)

    def register_case(self, name: str, body: F, ignored: bool = False) -> TestCase[F]:
        """Create a case and store it, replacing any case with the same name."""
        case = self.create_case(name, body, ignored)
        self._cases[name] = case
        return case

    @abstractmethod
    def do_before_class(self) -> None:
        pass

    @abstractmethod
    def do_after_class(self) -> None:
        pass

    @abstractmethod
    def do_test(self, case: TestCase[F]) -> None:
        """Run one case body with its per-case hooks. Raises on failure."""
        pass

    def run_case(self, case: TestCase[F]) -> CaseOutcome:
        """
        Run a single test and return the outcome.

        Args:
            case: Case to execute

        Returns:
            CaseOutcome carrying the elapsed time and the error, if any
        """
        start_ms = _now_ms()
        try:
            self.do_test(case)
        except Exception as e:
            logger.debug("Test %s failed: %r", case, e)
            return CaseOutcome.failure(e, _now_ms() - start_ms)
        return CaseOutcome.success(_now_ms() - start_ms)

    def run(self, listener: "TestListener") -> None:
        self.do_before_class()

        for case in self._cases.values():
            if case.ignored:
                listener.on_ignore(case)
                continue

            listener.on_start(case)
            outcome = self.run_case(case)
            if outcome.passed:
                listener.on_pass(case, outcome.duration_ms)
            else:
                listener.on_fail(case, outcome.error, outcome.duration_ms)

        self.do_after_class()
