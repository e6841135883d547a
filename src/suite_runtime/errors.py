"""Exceptions raised by the suite runtime."""


class SuiteRuntimeError(Exception):
    """Base class for errors raised by the runtime itself."""


class InvalidHookKindError(SuiteRuntimeError, ValueError):
    """A hook was registered under a kind the suite cannot hold."""

    def __init__(self, kind: object) -> None:
        super().__init__(f"Unknown function kind: {kind!r}")
        self.kind = kind


class MissingCompanionError(SuiteRuntimeError, NotImplementedError):
    """A class-level hook needs a companion object the suite does not provide."""

    def __init__(self, suite_name: str) -> None:
        super().__init__(f"Test class {suite_name!r} has no companion object")
        self.suite_name = suite_name


class DuplicateSuiteError(SuiteRuntimeError, ValueError):
    """Two different suites were registered under the same name."""


class UnknownSuiteError(SuiteRuntimeError, KeyError):
    """A suite was requested by a name that was never registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


class ConfigError(SuiteRuntimeError, ValueError):
    """Run configuration is missing or malformed."""
