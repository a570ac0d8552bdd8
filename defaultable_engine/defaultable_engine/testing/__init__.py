"""Deterministic stubs for tests and local walkthroughs."""
from .stubs import FailingCache, FakeClock, RecordingCache

__all__ = ["FailingCache", "FakeClock", "RecordingCache"]
