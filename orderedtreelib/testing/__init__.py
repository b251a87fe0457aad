"""Testing utilities for OrderedTreeLib consumers."""

from .fixtures import TreeInvariantChecker

__all__ = ['TreeInvariantChecker']
