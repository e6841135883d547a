"""Suite of plain top-level test functions."""

from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Tuple

from ..errors import InvalidHookKindError
from ..types import HookKind, TestCase
from .base import AbstractTestSuite

if TYPE_CHECKING:
    from ..registry import SuiteRegistry

TopLevelFunction = Callable[[], Any]


class TopLevelSuite(AbstractTestSuite[TopLevelFunction]):
    """Test suite whose cases and hooks are zero-argument callables."""

    def __init__(
        self,
        name: str,
        ignored: bool = False,
        registry: Optional["SuiteRegistry"] = None,
    ) -> None:
        self._functions: Dict[HookKind, Dict[TopLevelFunction, None]] = {kind: {} for kind in HookKind}
        super().__init__(name, ignored, registry)

    @property
    def before(self) -> Tuple[TopLevelFunction, ...]:
        return tuple(self._functions[HookKind.BEFORE_EACH])

    @property
    def after(self) -> Tuple[TopLevelFunction, ...]:
        return tuple(self._functions[HookKind.AFTER_EACH])

    @property
    def before_class(self) -> Tuple[TopLevelFunction, ...]:
        return tuple(self._functions[HookKind.BEFORE_CLASS])

    @property
    def after_class(self) -> Tuple[TopLevelFunction, ...]:
        return tuple(self._functions[HookKind.AFTER_CLASS])

    def register_function(self, kind: HookKind, function: TopLevelFunction) -> bool:
        """Register a hook; returns False if it was already registered."""
        if not isinstance(kind, HookKind):
            raise InvalidHookKindError(kind)

        functions = self._functions[kind]
        if function in functions:
            return False
        functions[function] = None
        return True

    def do_before_class(self) -> None:
        for function in self.before_class:
            function()

    def do_after_class(self) -> None:
        for function in self.after_class:
            function()

    def do_test(self, case: TestCase[TopLevelFunction]) -> None:
        try:
            for function in self.before:
                function()
            case.body()
        finally:
            for function in self.after:
                function()
