"""Test suite implementations."""

from .base import AbstractTestSuite, TestSuite
from .class_suite import ClassSuite
from .top_level import TopLevelSuite

__all__ = ["AbstractTestSuite", "TestSuite", "ClassSuite", "TopLevelSuite"]
