"""Unit-test assertions, a plain-text test runner and test-name filters."""

__version__ = "0.1.0"