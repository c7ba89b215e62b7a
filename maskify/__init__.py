"""Field level masking for personal and financial data."""

from maskify.common.errors import EmptyInputError, FormatError, MaskingError, PolicyError, RangeError
from maskify.governance.field_policy import (
    DataKind,
    FieldRule,
    MaskingPolicy,
    build_policy,
    load_policy,
    validate_policy,
)
from maskify.governance.pii_masking import (
    mask,
    mask_credit_card,
    mask_email,
    mask_id_number,
    mask_mobile_phone,
    mask_residential_phone,
    mask_tax_id,
    mask_vehicle_license_plate,
)

__version__ = "0.1.0"

__all__ = [
    "mask",
    "mask_id_number",
    "mask_tax_id",
    "mask_email",
    "mask_credit_card",
    "mask_mobile_phone",
    "mask_residential_phone",
    "mask_vehicle_license_plate",
    "DataKind",
    "FieldRule",
    "MaskingPolicy",
    "build_policy",
    "load_policy",
    "validate_policy",
    "MaskingError",
    "EmptyInputError",
    "FormatError",
    "RangeError",
    "PolicyError",
]
