"""PII masking utilities.

Every function validates the whole value before building any output, so a
failure never returns a partially masked string. Blank input is always
reported before format problems.
"""

from __future__ import annotations

from typing import Optional

from maskify.common.errors import EmptyInputError, FormatError, RangeError
from maskify.governance.formatters import (
    PLATE_LENGTH,
    check_mask_character,
    classify_credit_card,
    clean_license_plate,
    extract_digits,
    fill,
    format_id_number,
    format_mobile_phone,
    format_residential_phone,
    format_tax_id,
    is_blank,
    is_valid_plate_format,
    parse_email,
)

DEFAULT_MASK_CHARACTER = "*"

CPF_DIGITS = 11
CNPJ_DIGITS = 14
MOBILE_PHONE_DIGITS = 11
RESIDENTIAL_PHONE_DIGITS = 10


def mask(
    value: Optional[str],
    start_position: int,
    length: int,
    mask_character: str = DEFAULT_MASK_CHARACTER,
) -> str:
    """Mask ``length`` characters of ``value`` starting at ``start_position``."""
    if is_blank(value):
        raise EmptyInputError("No data was provided for masking")
    check_mask_character(mask_character)
    if start_position < 0 or start_position >= len(value):
        raise RangeError(
            f"start_position {start_position} is out of range for a value of length {len(value)}"
        )
    if length <= 0 or start_position + length > len(value):
        raise RangeError(
            f"length {length} from position {start_position} is out of range "
            f"for a value of length {len(value)}"
        )

    result = list(value)
    fill(result, start_position, start_position + length, mask_character)
    return "".join(result)


def mask_id_number(value: Optional[str], mask_character: str = DEFAULT_MASK_CHARACTER) -> str:
    """Mask a CPF, formatted or not, as ``000.***.**0-00``."""
    if is_blank(value):
        raise EmptyInputError("CPF not provided.")
    check_mask_character(mask_character)

    digits = extract_digits(value, CPF_DIGITS)
    if len(digits) != CPF_DIGITS:
        raise FormatError("CPF must have 11 digits.")

    fill(digits, 3, 8, mask_character)
    return format_id_number(digits)


def mask_tax_id(value: Optional[str], mask_character: str = DEFAULT_MASK_CHARACTER) -> str:
    """Mask a CNPJ, formatted or not, as ``00.***.***/**00-00``."""
    if is_blank(value):
        raise EmptyInputError("CNPJ not provided.")
    check_mask_character(mask_character)

    digits = extract_digits(value, CNPJ_DIGITS)
    if len(digits) != CNPJ_DIGITS:
        raise FormatError("CNPJ must have 14 digits.")

    fill(digits, 2, 10, mask_character)
    return format_tax_id(digits)


def mask_email(value: Optional[str], mask_character: str = DEFAULT_MASK_CHARACTER) -> str:
    """Mask the local part of an email as ``u**r@example.com``."""
    if is_blank(value):
        raise EmptyInputError("Email not provided.")
    check_mask_character(mask_character)

    address = parse_email(value)
    if address is None:
        raise FormatError("Invalid email.")

    at_position = address.index("@")
    result = list(address)
    fill(result, 1, at_position - 1, mask_character)
    return "".join(result)


def mask_credit_card(value: Optional[str], mask_character: str = DEFAULT_MASK_CHARACTER) -> str:
    """Mask all but the last group of a space separated card number.

    The original spacing is kept and only the characters inside the scheme's
    mask window are replaced.
    """
    if is_blank(value):
        raise EmptyInputError("Credit card not provided.")
    check_mask_character(mask_character)

    scheme = classify_credit_card(value)
    if scheme is None:
        raise FormatError("Invalid credit card.")

    result = list(value)
    for index in range(scheme.mask_window):
        if result[index] != " ":
            result[index] = mask_character
    return "".join(result)


def mask_mobile_phone(value: Optional[str], mask_character: str = DEFAULT_MASK_CHARACTER) -> str:
    """Mask an 11 digit mobile number as ``(00) 0****-0000``."""
    if is_blank(value):
        raise EmptyInputError("Phone number not provided.")
    check_mask_character(mask_character)

    digits = extract_digits(value, MOBILE_PHONE_DIGITS)
    if len(digits) != MOBILE_PHONE_DIGITS:
        raise FormatError("The mobile phone number must have 11 digits (9 digits + area code).")

    return format_mobile_phone(digits, mask_character)


def mask_residential_phone(
    value: Optional[str], mask_character: str = DEFAULT_MASK_CHARACTER
) -> str:
    """Mask a 10 digit landline number as ``(00) ****-0000``."""
    if is_blank(value):
        raise EmptyInputError("Phone number not provided.")
    check_mask_character(mask_character)

    digits = extract_digits(value, RESIDENTIAL_PHONE_DIGITS)
    if len(digits) != RESIDENTIAL_PHONE_DIGITS:
        raise FormatError("The landline phone number must have 10 digits (8 digits + area code).")

    return format_residential_phone(digits, mask_character)


def mask_vehicle_license_plate(
    value: Optional[str], mask_character: str = DEFAULT_MASK_CHARACTER
) -> str:
    """Mask a legacy (ABC1234) or Mercosur (ABC1D23) plate, keeping the letters prefix."""
    if is_blank(value):
        raise EmptyInputError("License plate not provided.")
    check_mask_character(mask_character)

    plate = list(clean_license_plate(value))
    if len(plate) != PLATE_LENGTH or not is_valid_plate_format("".join(plate)):
        raise FormatError("Invalid license plate format.")

    fill(plate, 3, PLATE_LENGTH, mask_character)
    return "".join(plate)
