"""Suite Runtime.

A minimal test-execution runtime: suites of named cases, lifecycle hooks,
and sequential runs reported to a listener.
"""

__version__ = "0.1.0"

from .config import RunConfig, configure_logging, load_config
from .errors import (
    ConfigError,
    DuplicateSuiteError,
    InvalidHookKindError,
    MissingCompanionError,
    SuiteRuntimeError,
    UnknownSuiteError,
)
from .listener import CompositeListener, LoggingListener, RecordingListener, TestListener
from .registry import SuiteRegistry
from .runner import run_all_suites
from .suites import AbstractTestSuite, ClassSuite, TestSuite, TopLevelSuite
from .types import (
    CLASS_KINDS,
    INSTANCE_KINDS,
    CaseOutcome,
    HookKind,
    TestCase,
    TestResult,
    TestSuiteResult,
    TestSummary,
)

__all__ = [
    "__version__",
    "RunConfig",
    "configure_logging",
    "load_config",
    "ConfigError",
    "DuplicateSuiteError",
    "InvalidHookKindError",
    "MissingCompanionError",
    "SuiteRuntimeError",
    "UnknownSuiteError",
    "CompositeListener",
    "LoggingListener",
    "RecordingListener",
    "TestListener",
    "SuiteRegistry",
    "run_all_suites",
    "AbstractTestSuite",
    "ClassSuite",
    "TestSuite",
    "TopLevelSuite",
    "CLASS_KINDS",
    "INSTANCE_KINDS",
    "CaseOutcome",
    "HookKind",
    "TestCase",
    "TestResult",
    "TestSuiteResult",
    "TestSummary",
]
