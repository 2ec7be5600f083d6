"""Failure taxonomy shared by the record store and the processor registry.

Public operations never let these escape: they are raised at the failure
site, logged at the operation boundary and reported as ``False``/``None``.
"""
from __future__ import annotations


class KuramaError(Exception):
    """Base class for core failures."""


class AllocationFailure(KuramaError):
    """The record store could not grow its backing sequence."""


class NotFound(KuramaError):
    """No record or processor matched the lookup key."""


class CapacityExceeded(KuramaError):
    """The processor registry is already holding its maximum."""


class InvalidArgument(KuramaError):
    """A required string argument was missing or empty."""


def require_text(value: str | None, field: str) -> str:
    if value is None or value == "":
        raise InvalidArgument(f"{field} must be a non-empty string")
    return value
