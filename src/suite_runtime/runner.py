"""Test runner."""

import logging
import time
from typing import List, Optional

from .config import RunConfig
from .listener import CompositeListener, RecordingListener, TestListener
from .registry import SuiteRegistry
from .types import TestSummary

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return int(time.monotonic() * 1000)


def run_all_suites(
    registry: SuiteRegistry,
    listener: Optional[TestListener] = None,
    suite_names: Optional[List[str]] = None,
    config: Optional[RunConfig] = None,
) -> TestSummary:
    """
    Run every registered suite (or specific ones if provided), one at a time.

    Args:
        registry: Suites to run
        listener: Optional listener receiving every notification
        suite_names: Optional list of suite names to run; overrides config.suites
        config: Optional run configuration

    Returns:
        TestSummary with results from all suites

    Raises:
        UnknownSuiteError: If a requested suite is not registered
        Exception: A class-level hook error, when config.fail_fast is set
    """
    config = config or RunConfig()
    start_ms = _now_ms()

    recorder = RecordingListener()
    notify = CompositeListener(recorder, listener) if listener else recorder

    suites = registry.select(suite_names or config.suites, config.exclude)

    for suite in suites:
        if suite.ignored:
            logger.info("Skipping ignored test suite: %s", suite.name)
            notify.on_suite_ignore(suite)
            for case in suite.cases.values():
                notify.on_ignore(case)
            continue

        logger.info("Running test suite: %s", suite.name)
        notify.on_suite_start(suite)
        suite_start_ms = _now_ms()
        try:
            suite.run(notify)
        except Exception as e:
            logger.error(f"Test suite {suite.name} aborted by class-level hook: {e}", exc_info=True)
            notify.on_suite_error(suite, e)
            if config.fail_fast:
                raise
        notify.on_suite_end(suite, _now_ms() - suite_start_ms)

    summary = recorder.summary
    summary.duration_ms = _now_ms() - start_ms
    logger.info(
        "Ran %d test(s): %d passed, %d failed, %d ignored, %d suite error(s)",
        summary.total,
        summary.passed,
        summary.failed,
        summary.skipped,
        summary.errored,
    )
    return summary
