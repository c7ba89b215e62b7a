"""Extraction, validation and canonical formatting helpers for the maskers."""

from __future__ import annotations

import re
from email.utils import parseaddr
from enum import Enum
from typing import Any, List, Optional, Sequence

from maskify.common.errors import FormatError

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

PLATE_LENGTH = 7
LEGACY_PLATE_PATTERN = re.compile(r"^[A-Z]{3}[0-9]{4}$")
MERCOSUR_PLATE_PATTERN = re.compile(r"^[A-Z]{3}[0-9][A-Z][0-9]{2}$")


class CardScheme(Enum):
    """Card layouts accepted for masking: (digits, space groups, mask window)."""

    STANDARD = (16, 4, 15)
    AMEX = (15, 3, 14)
    DINERS = (14, 3, 13)

    def __init__(self, digit_count: int, group_count: int, mask_window: int):
        self.digit_count = digit_count
        self.group_count = group_count
        self.mask_window = mask_window


def is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def is_mask_character(value: Any) -> bool:
    return isinstance(value, str) and len(value) == 1


def check_mask_character(mask_character: Any) -> None:
    if not is_mask_character(mask_character):
        raise FormatError("mask_character must be a single character.")


def extract_digits(value: str, capacity: int) -> List[str]:
    """Copy digits from ``value`` into a buffer holding at most ``capacity``.

    Reading stops as soon as the buffer is full, so digits past the capacity
    are ignored. Callers compare ``len(buffer)`` with the capacity to decide
    whether the value was complete.
    """
    buffer: List[str] = []
    for char in value:
        if len(buffer) == capacity:
            break
        if char.isdecimal():
            buffer.append(char)
    return buffer


def fill(buffer: List[str], start: int, stop: int, mask_character: str) -> None:
    for index in range(start, stop):
        buffer[index] = mask_character


def format_id_number(digits: Sequence[str]) -> str:
    """Render an 11 character buffer as ``000.000.000-00``."""
    return "{}.{}.{}-{}".format(
        "".join(digits[0:3]),
        "".join(digits[3:6]),
        "".join(digits[6:9]),
        "".join(digits[9:11]),
    )


def format_tax_id(digits: Sequence[str]) -> str:
    """Render a 14 character buffer as ``00.000.000/0000-00``."""
    return "{}.{}.{}/{}-{}".format(
        "".join(digits[0:2]),
        "".join(digits[2:5]),
        "".join(digits[5:8]),
        "".join(digits[8:12]),
        "".join(digits[12:14]),
    )


def format_mobile_phone(digits: Sequence[str], mask_character: str) -> str:
    """Render 11 phone digits as ``(00) 0****-0000``."""
    area_code = "".join(digits[0:2])
    suffix = "".join(digits[7:11])
    return f"({area_code}) {digits[2]}{mask_character * 4}-{suffix}"


def format_residential_phone(digits: Sequence[str], mask_character: str) -> str:
    """Render 10 phone digits as ``(00) ****-0000``."""
    area_code = "".join(digits[0:2])
    suffix = "".join(digits[6:10])
    return f"({area_code}) {mask_character * 4}-{suffix}"


def classify_credit_card(value: str) -> Optional[CardScheme]:
    digit_count = sum(1 for char in value if char.isdecimal())
    group_count = len(value.split(" "))
    for scheme in CardScheme:
        if digit_count == scheme.digit_count and group_count == scheme.group_count:
            return scheme
    return None


def parse_email(value: str) -> Optional[str]:
    """Return the canonical address for ``value`` or ``None`` when it is invalid."""
    if "@" not in value or not EMAIL_PATTERN.match(value):
        return None
    _, address = parseaddr(value)
    if address.count("@") != 1:
        return None
    return address


def clean_license_plate(value: str) -> str:
    return "".join(char for char in value if char.isascii() and char.isalnum()).upper()


def is_valid_plate_format(plate: str) -> bool:
    if len(plate) != PLATE_LENGTH:
        return False
    return bool(LEGACY_PLATE_PATTERN.match(plate) or MERCOSUR_PLATE_PATTERN.match(plate))
