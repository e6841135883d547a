"""Registry of the suites available to a runner."""

import logging
from typing import TYPE_CHECKING, Dict, Iterable, Iterator, List, Optional

from .errors import DuplicateSuiteError, UnknownSuiteError

if TYPE_CHECKING:
    from .suites.base import TestSuite

logger = logging.getLogger(__name__)


class SuiteRegistry:
    """Suites keyed by name, kept in registration order."""

    def __init__(self) -> None:
        self._suites: Dict[str, "TestSuite"] = {}

    def register(self, suite: "TestSuite") -> None:
        """
        Register a suite.

        Args:
            suite: Suite to register

        Raises:
            DuplicateSuiteError: If another suite already uses this name
        """
        existing = self._suites.get(suite.name)
        if existing is suite:
            return
        if existing is not None:
            raise DuplicateSuiteError(f"Test suite already registered: {suite.name}")

        logger.debug("Registered test suite: %s", suite.name)
        self._suites[suite.name] = suite

    def get(self, name: str) -> Optional["TestSuite"]:
        return self._suites.get(name)

    @property
    def names(self) -> List[str]:
        return list(self._suites)

    @property
    def suites(self) -> List["TestSuite"]:
        return list(self._suites.values())

    def select(
        self,
        names: Optional[Iterable[str]] = None,
        exclude: Optional[Iterable[str]] = None,
    ) -> List["TestSuite"]:
        """
        Pick suites to run, in registration order.

        Args:
            names: Suite names to include (all suites if None or empty)
            exclude: Suite names to leave out

        Returns:
            Matching suites

        Raises:
            UnknownSuiteError: If a name in names or exclude is not registered
        """
        wanted = set(names or ())
        skipped = set(exclude or ())

        unknown = sorted((wanted | skipped) - set(self._suites))
        if unknown:
            raise UnknownSuiteError(f"Unknown test suite(s): {', '.join(unknown)}")

        return [
            suite
            for name, suite in self._suites.items()
            if (not wanted or name in wanted) and name not in skipped
        ]

    def __contains__(self, name: object) -> bool:
        return name in self._suites

    def __iter__(self) -> Iterator["TestSuite"]:
        return iter(list(self._suites.values()))

    def __len__(self) -> int:
        return len(self._suites)
