"""Exceptions raised by the debate core.

ModelInvocationError maps to HTTP 502 Bad Gateway in the handler layer.
"""


class DebateCoreError(Exception):
    """Base class for debate core errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ModelInvocationError(DebateCoreError):
    """The upstream generation call failed and nothing was cached for it."""


class ModelClientError(DebateCoreError):
    """A model client could not reach the backend or parse its reply."""
