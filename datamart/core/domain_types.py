"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - DataItemId, PurchaserId are canonical 36-char identifier strings
    - Principal is opaque: compared for equality, never parsed
    - StoreNamespace values are the numeric keys separating the two record stores
    - MessageKind is the closed set of error kinds returned to callers

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums serialize to JSON without custom encoders
"""

from enum import Enum, IntEnum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

DataItemId = NewType("DataItemId", str)
PurchaserId = NewType("PurchaserId", str)
Principal = NewType("Principal", str)


# ─── Value Types ─────────────────────────────────────────────────

Nat64 = NewType("Nat64", int)   # 0 .. 2**64 - 1

NAT64_MAX: int = 2**64 - 1


# ─── Enums ───────────────────────────────────────────────────────

class StoreNamespace(IntEnum):
    """Numeric namespaces for the record stores. Never renumber."""
    DATA_ITEMS = 0
    PURCHASERS = 1


class MessageKind(str, Enum):
    """Error variants returned by marketplace operations."""
    NOT_FOUND = "NotFound"
    INVALID_PAYLOAD = "InvalidPayload"
    PAYMENT_FAILED = "PaymentFailed"
    PAYMENT_COMPLETED = "PaymentCompleted"
    AUTHENTICATION_FAILED = "AuthenticationFailed"
