"""Unified exception hierarchy for Wirebox.

All library exceptions inherit from WireboxException, enabling unified
error handling across modules.

Categories:
- InfrastructureException: container metadata, scope storage and
  request-context failures
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class WireboxException(Exception):
    """Base exception for all Wirebox errors.

    Carries an optional error code and context dict for structured error data.
    Catch WireboxException to handle all library errors, or catch specific
    subclasses for targeted handling.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "BEAN_DEFINITION_INVALID").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(WireboxException):
    """Infrastructure failures: container metadata, scope storage, context."""
