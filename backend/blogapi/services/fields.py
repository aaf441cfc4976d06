"""Presence checks for request bodies."""

import math
from typing import Any, Dict, List, Tuple

from blogapi.exceptions import MissingFieldError

# (attribute, wire name) pairs, in the order they appear in error messages
FieldSpec = List[Tuple[str, str]]


def is_missing(value: Any) -> bool:
    """
    Absent, null, false, zero, NaN and the empty string count as missing.

    Empty objects and arrays count as present; the model rejects them later
    as a failed cast.
    """
    if value is None or value is False or value == "":
        return True
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value == 0 or (isinstance(value, float) and math.isnan(value))
    return False


def require_fields(payload, fields: FieldSpec) -> Dict[str, Any]:
    """
    Return the named attributes of `payload`, or raise MissingFieldError if
    any of them is missing (see `is_missing`).

    Only presence is checked here. Whitespace-only strings pass and are
    rejected later by the model once trimmed.
    """
    values = {attr: getattr(payload, attr) for attr, _ in fields}
    missing = [wire for attr, wire in fields if is_missing(values[attr])]
    if missing:
        raise MissingFieldError([wire for _, wire in fields], missing=missing)
    return values
