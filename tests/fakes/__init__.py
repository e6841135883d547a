"""In-memory fakes for testing."""

from .listener import FakeListener

__all__ = ["FakeListener"]
