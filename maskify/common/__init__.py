"""Common utilities shared by the masking modules."""

from maskify.common.errors import EmptyInputError, FormatError, MaskingError, PolicyError, RangeError

__all__ = ["MaskingError", "EmptyInputError", "FormatError", "RangeError", "PolicyError"]
