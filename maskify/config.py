"""Environment driven settings for field masking policies."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from maskify.governance.pii_masking import DEFAULT_MASK_CHARACTER


@dataclass(frozen=True)
class MaskingSettings:
    mask_character: str = DEFAULT_MASK_CHARACTER
    policy_path: Optional[str] = None

    @classmethod
    def from_env(cls) -> "MaskingSettings":
        mask_character = os.getenv("MASKIFY_MASK_CHARACTER", DEFAULT_MASK_CHARACTER)
        policy_path = os.getenv("MASKIFY_POLICY_PATH", "").strip() or None
        return cls(mask_character=mask_character, policy_path=policy_path)
