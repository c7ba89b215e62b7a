"""Field masking policies.

A policy is an explicit table of ``(field, kind, mask character)`` rules. It is
applied to plain records or pandas frames right before they leave the service,
replacing each listed field with its masked value.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import partial
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Union

import pandas as pd
import yaml

from maskify.common.errors import MaskingError, PolicyError
from maskify.config import MaskingSettings
from maskify.governance.formatters import is_mask_character
from maskify.governance.pii_masking import (
    DEFAULT_MASK_CHARACTER,
    mask_credit_card,
    mask_email,
    mask_id_number,
    mask_mobile_phone,
    mask_residential_phone,
    mask_tax_id,
    mask_vehicle_license_plate,
)
from maskify.observability.logging import logger


class DataKind(Enum):
    CPF = "cpf"
    CNPJ = "cnpj"
    CREDIT_CARD = "credit_card"
    EMAIL = "email"
    MOBILE_PHONE = "mobile_phone"
    RESIDENTIAL_PHONE = "residential_phone"
    VEHICLE_LICENSE_PLATE = "vehicle_license_plate"


MASKERS: Dict[DataKind, Callable[..., str]] = {
    DataKind.CPF: mask_id_number,
    DataKind.CNPJ: mask_tax_id,
    DataKind.CREDIT_CARD: mask_credit_card,
    DataKind.EMAIL: mask_email,
    DataKind.MOBILE_PHONE: mask_mobile_phone,
    DataKind.RESIDENTIAL_PHONE: mask_residential_phone,
    DataKind.VEHICLE_LICENSE_PLATE: mask_vehicle_license_plate,
}

VALID_KINDS = [kind.value for kind in DataKind]


def _parse_kind(kind: Union[DataKind, str]) -> DataKind:
    if isinstance(kind, DataKind):
        return kind
    try:
        return DataKind(str(kind).strip().lower())
    except ValueError as exc:
        raise PolicyError(
            f"Unsupported data kind '{kind}'. Expected one of: {', '.join(VALID_KINDS)}"
        ) from exc


@dataclass(frozen=True)
class FieldRule:
    field: str
    kind: DataKind
    mask_character: str = DEFAULT_MASK_CHARACTER

    def __post_init__(self):
        object.__setattr__(self, "kind", _parse_kind(self.kind))
        if not is_mask_character(self.mask_character):
            raise PolicyError(
                f"mask_character for field '{self.field}' must be a single character"
            )

    def mask(self, value: str) -> str:
        return MASKERS[self.kind](value, mask_character=self.mask_character)


@dataclass
class PolicyReport:
    errors: List[str]
    warnings: List[str]

    @property
    def passed(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class MaskingPolicy:
    """Ordered masking rules applied to records and data frames."""

    name: str
    rules: Tuple[FieldRule, ...]

    @property
    def fields(self) -> List[str]:
        return [rule.field for rule in self.rules]

    def apply(self, record: Dict[str, Any]) -> Dict[str, Any]:
        """Return a copy of ``record`` with every listed field masked.

        Fields that are absent or ``None`` are left as they are. Any masking
        error is raised to the caller and no partially masked record is
        returned.
        """
        masked = dict(record)
        for rule in self.rules:
            value = masked.get(rule.field)
            if value is None:
                continue
            masked[rule.field] = self._mask_value(rule, value)
        return masked

    def apply_many(self, records: Iterable[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return [self.apply(record) for record in records]

    def apply_frame(self, frame: pd.DataFrame) -> pd.DataFrame:
        masked = frame.copy()
        for rule in self.rules:
            if rule.field not in masked.columns:
                continue
            masked[rule.field] = masked[rule.field].map(
                partial(self._mask_value, rule), na_action="ignore"
            )
        return masked

    def _mask_value(self, rule: FieldRule, value: Any) -> str:
        try:
            return rule.mask(str(value))
        except MaskingError as exc:
            logger.warning(
                "field_mask_failed",
                policy=self.name,
                field=rule.field,
                kind=rule.kind.value,
                reason=str(exc),
            )
            raise


def validate_policy(raw: Any) -> PolicyReport:
    """Check a raw policy document without raising."""
    errors: List[str] = []
    warnings: List[str] = []

    if not isinstance(raw, dict):
        return PolicyReport(errors=["Policy document must be a mapping"], warnings=warnings)

    header = raw.get("policy") or {}
    if not isinstance(header, dict):
        errors.append("policy section must be a mapping")
        header = {}
    if not header.get("name"):
        warnings.append("policy.name is not set - using 'default'")

    default_mask = header.get("mask_character")
    if default_mask is not None and not is_mask_character(default_mask):
        errors.append("policy.mask_character must be a single character")

    fields = raw.get("fields")
    if not isinstance(fields, list):
        errors.append("Missing required section: fields")
        return PolicyReport(errors=errors, warnings=warnings)

    if not fields:
        warnings.append("fields is empty - the policy will not mask anything")

    seen = set()
    for position, entry in enumerate(fields):
        if not isinstance(entry, dict):
            errors.append(f"fields[{position}] must be a mapping")
            continue

        name = entry.get("field")
        if not name:
            errors.append(f"Missing required field: fields[{position}].field")
        elif name in seen:
            errors.append(f"Duplicate rule for field '{name}'")
        else:
            seen.add(name)

        kind = entry.get("kind")
        if not kind:
            errors.append(f"Missing required field: fields[{position}].kind")
        elif str(kind).strip().lower() not in VALID_KINDS:
            errors.append(
                f"fields[{position}].kind '{kind}' is not one of: {', '.join(VALID_KINDS)}"
            )

        if "mask_character" in entry and not is_mask_character(entry["mask_character"]):
            errors.append(f"fields[{position}].mask_character must be a single character")

    return PolicyReport(errors=errors, warnings=warnings)


def build_policy(raw: Any, default_mask_character: str = DEFAULT_MASK_CHARACTER) -> MaskingPolicy:
    report = validate_policy(raw)
    if not report.passed:
        raise PolicyError("Invalid masking policy: " + "; ".join(report.errors))

    header = raw.get("policy") or {}
    policy_mask = header.get("mask_character", default_mask_character)
    rules = tuple(
        FieldRule(
            field=entry["field"],
            kind=entry["kind"],
            mask_character=entry.get("mask_character", policy_mask),
        )
        for entry in raw["fields"]
    )
    return MaskingPolicy(name=header.get("name") or "default", rules=rules)


def load_policy(
    path: Optional[Union[str, Path]] = None, settings: Optional[MaskingSettings] = None
) -> MaskingPolicy:
    """Load a masking policy from a YAML file.

    Without an explicit ``path`` the file named by ``MASKIFY_POLICY_PATH`` is
    used. Rules that set no mask character fall back to the policy default and
    then to ``MASKIFY_MASK_CHARACTER``.
    """
    settings = settings or MaskingSettings.from_env()
    path = path or settings.policy_path
    if path is None:
        raise PolicyError("No policy path given and MASKIFY_POLICY_PATH is not set")

    with open(path) as handle:
        raw = yaml.safe_load(handle)

    policy = build_policy(raw, default_mask_character=settings.mask_character)
    logger.info(
        "masking_policy_loaded",
        policy=policy.name,
        path=str(path),
        fields=len(policy.rules),
    )
    return policy
