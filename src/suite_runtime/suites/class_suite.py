"""Suite whose cases run as methods against a fresh instance per case."""

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Dict, Generic, Optional, Tuple, TypeVar

from ..errors import InvalidHookKindError, MissingCompanionError
from ..types import CLASS_KINDS, INSTANCE_KINDS, HookKind, TestCase
from .base import AbstractTestSuite

if TYPE_CHECKING:
    from ..registry import SuiteRegistry

InstanceT = TypeVar("InstanceT")
CompanionT = TypeVar("CompanionT")

InstanceFunction = Callable[[Any], None]


class ClassSuite(AbstractTestSuite[InstanceFunction], Generic[InstanceT, CompanionT]):
    """
    Test suite bound to a test class.

    Case bodies and BEFORE_EACH/AFTER_EACH hooks take the test instance as
    their only argument; every case gets its own instance from
    create_instance(). BEFORE_CLASS/AFTER_CLASS hooks take the companion
    object returned by get_companion().
    """

    def __init__(
        self,
        name: str,
        ignored: bool = False,
        registry: Optional["SuiteRegistry"] = None,
    ) -> None:
        self._instance_functions: Dict[HookKind, Dict[Callable[[InstanceT], None], None]] = {
            kind: {} for kind in INSTANCE_KINDS
        }
        self._companion_functions: Dict[HookKind, Dict[Callable[[CompanionT], None], None]] = {
            kind: {} for kind in CLASS_KINDS
        }
        super().__init__(name, ignored, registry)

    @abstractmethod
    def create_instance(self) -> InstanceT:
        """Create the object a single case runs against."""
        pass

    def get_companion(self) -> CompanionT:
        """Return the object class-level hooks run against."""
        raise MissingCompanionError(self.name)

    @property
    def before(self) -> Tuple[Callable[[InstanceT], None], ...]:
        return tuple(self._instance_functions[HookKind.BEFORE_EACH])

    @property
    def after(self) -> Tuple[Callable[[InstanceT], None], ...]:
        return tuple(self._instance_functions[HookKind.AFTER_EACH])

    @property
    def before_class(self) -> Tuple[Callable[[CompanionT], None], ...]:
        return tuple(self._companion_functions[HookKind.BEFORE_CLASS])

    @property
    def after_class(self) -> Tuple[Callable[[CompanionT], None], ...]:
        return tuple(self._companion_functions[HookKind.AFTER_CLASS])

    def register_function(self, kind: HookKind, function: Callable[[Any], None]) -> bool:
        """
        Register a hook function.

        Args:
            kind: Lifecycle point to attach the hook to
            function: Hook taking the instance (per-case kinds) or the
                companion (class-level kinds)

        Returns:
            True if the hook was added, False if it was already registered

        Raises:
            InvalidHookKindError: If kind is not a HookKind
        """
        if not isinstance(kind, HookKind):
            raise InvalidHookKindError(kind)

        if kind in INSTANCE_KINDS:
            functions = self._instance_functions[kind]
        elif kind in CLASS_KINDS:
            functions = self._companion_functions[kind]
        else:
            raise InvalidHookKindError(kind)

        if function in functions:
            return False
        functions[function] = None
        return True

    def do_before_class(self) -> None:
        for function in self.before_class:
            function(self.get_companion())

    def do_after_class(self) -> None:
        for function in self.after_class:
            function(self.get_companion())

    def do_test(self, case: TestCase[InstanceFunction]) -> None:
        instance = self.create_instance()
        try:
            for function in self.before:
                function(instance)
            case.body(instance)
        finally:
            for function in self.after:
                function(instance)
