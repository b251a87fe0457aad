"""Exceptions raised by OrderedTreeLib.

Ordinary outcomes are not errors: a duplicate insert is ignored and a
prune that finds nothing returns False. Exceptions are reserved for
operations the tree cannot perform and for invalid configuration.
"""


class OrderedTreeError(Exception):
    """Base class for all OrderedTreeLib errors."""
    pass


class UnsupportedOperationError(OrderedTreeError, NotImplementedError):
    """Raised when an operation has no defined behaviour."""

    def __init__(self, operation: str, reason: str = ""):
        self.operation = operation
        self.reason = reason
        message = f"{operation} is not supported"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class InvalidConfigurationError(OrderedTreeError, ValueError):
    """Raised when a traversal or render configuration is inconsistent."""

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__(f"Invalid configuration: {'; '.join(self.errors)}")
