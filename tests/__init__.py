"""Test suite for the suite runtime.

1. suites/: the run protocol and both suite variants
2. top level: registry, listeners, runner and config
3. fakes/: in-memory listener capturing the notification stream
"""
