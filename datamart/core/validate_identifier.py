"""Identifier Validation - guards every lookup by id.

Invariants:
    - Pure function: no IO
    - Accepts exactly 8-4-4-4-12 hex groups, case-insensitive
    - Malformed ids are rejected before any store access
"""

import re

_UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def is_valid_uuid(value: object) -> bool:
    """True iff value is a canonical 36-char hyphenated hex identifier."""
    return isinstance(value, str) and _UUID_PATTERN.fullmatch(value) is not None
