"""Payload Validation - domain rules for record creation and update payloads.

Invariants:
    - Pure functions: return a list of error strings, empty list means valid
    - Every violation is collected; validation never stops at the first failure
    - Error order follows the field order below, price last
    - Field labels use the wire names (attachmentURL, not attachment_url)

Design Decisions:
    - Structural checks (types, missing keys, negative integers) belong to the
      Pydantic schemas; these functions only see well-typed fields
"""

from typing import Mapping

# (attribute, wire label), checked in this order
_DATA_ITEM_TEXT_FIELDS: tuple[tuple[str, str], ...] = (
    ("description", "description"),
    ("quality", "quality"),
    ("title", "title"),
    ("attachment_url", "attachmentURL"),
)

_PURCHASER_TEXT_FIELDS: tuple[tuple[str, str], ...] = (
    ("name", "name"),
    ("message", "message"),
)


def is_invalid_string(value: str) -> bool:
    """Empty or whitespace-only."""
    return len(value.strip()) == 0


def _collect_errors(
    fields: Mapping[str, object],
    text_fields: tuple[tuple[str, str], ...],
) -> list[str]:
    errors: list[str] = []
    for attr, label in text_fields:
        value = str(fields.get(attr, ""))
        if is_invalid_string(value):
            errors.append(f"{label}='{value}' cannot be empty.")
    price = fields.get("price", 0)
    if price == 0:
        errors.append(f"price='{price}' must be greater than zero.")
    return errors


def validate_data_item_payload(fields: Mapping[str, object]) -> list[str]:
    """Validate a DataItem payload: description, quality, title, attachmentURL, price."""
    return _collect_errors(fields, _DATA_ITEM_TEXT_FIELDS)


def validate_purchaser_payload(fields: Mapping[str, object]) -> list[str]:
    """Validate a Purchaser payload: name, message, price."""
    return _collect_errors(fields, _PURCHASER_TEXT_FIELDS)
