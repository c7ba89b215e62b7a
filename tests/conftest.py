"""Shared pytest fixtures."""

from __future__ import annotations

import pandas as pd
import pytest

from maskify.governance.field_policy import DataKind, FieldRule, MaskingPolicy


@pytest.fixture
def customer_record() -> dict:
    return {
        "customer_id": "C1",
        "cpf": "831.851.580-32",
        "email": "user@example.com",
        "mobile": "(11) 91234-5678",
        "card": "1234 5678 9012 3450",
        "plate": "BRA2E19",
    }


@pytest.fixture
def customer_policy() -> MaskingPolicy:
    return MaskingPolicy(
        name="customer-export",
        rules=(
            FieldRule(field="cpf", kind=DataKind.CPF),
            FieldRule(field="email", kind=DataKind.EMAIL),
            FieldRule(field="mobile", kind=DataKind.MOBILE_PHONE),
            FieldRule(field="card", kind=DataKind.CREDIT_CARD),
            FieldRule(field="plate", kind=DataKind.VEHICLE_LICENSE_PLATE),
        ),
    )


@pytest.fixture
def customer_frame() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "customer_id": ["C1", "C2", "C3"],
            "cpf": ["831.851.580-32", "836.936.780-14", None],
            "cnpj": ["18.908.908/0001-63", "06.674.181/0001-18", "12.345.678/0001-95"],
            "email": ["user@example.com", "user.com@server.com", "ab@example.com"],
            "landline": ["(11) 2345-6789", "(21) 3456-7890", None],
            "card": ["1234 5678 9012 3450", "3410 545498 90684", "3024 379373 3825"],
        }
    )


@pytest.fixture
def policy_file(tmp_path):
    path = tmp_path / "policy.yaml"
    path.write_text(
        "policy:\n"
        "  name: customer-export\n"
        "  mask_character: '#'\n"
        "fields:\n"
        "  - field: cpf\n"
        "    kind: cpf\n"
        "  - field: email\n"
        "    kind: email\n"
        "    mask_character: '*'\n"
        "  - field: landline\n"
        "    kind: residential_phone\n"
    )
    return path
