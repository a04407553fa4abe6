from __future__ import annotations

import re
from typing import Any, Optional

from ..core.exceptions import ValidationError

_HEX_COLOR = re.compile(r"#[0-9A-Fa-f]{6}")


def require_str(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value


def require_non_empty(value: Any, field_name: str) -> str:
    if not require_str(value, field_name).strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_hex_color(value: Any, field_name: str = "color") -> str:
    if not isinstance(value, str) or not _HEX_COLOR.fullmatch(value):
        raise ValidationError(f'{field_name} must be a valid hex color (e.g., "#FFD700")')
    return value


def optional_text(value: Any, field_name: str = "description") -> Optional[str]:
    if value is None:
        return None
    value = require_str(value, field_name).strip()
    return value or None
