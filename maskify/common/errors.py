"""Errors raised by the masking functions and the field policy layer."""

from __future__ import annotations


class MaskingError(ValueError):
    """Base class for every error raised by maskify."""


class EmptyInputError(MaskingError):
    """Raised when the value to mask is missing or blank."""


class FormatError(MaskingError):
    """Raised when a value is present but does not have the expected shape."""


class RangeError(MaskingError):
    """Raised when a mask window falls outside the value."""


class PolicyError(MaskingError):
    """Raised when a field masking policy cannot be built."""
