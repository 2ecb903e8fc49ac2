"""
registry_services.domain.models

Record types held by the resource stores.

Responsibilities:
- Define immutable `Order` and `User` records (status changes replace the record).
- Define the order status enumeration and its membership check.
- Compose an order with optional user details for enriched reads.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from datetime import datetime


class OrderStatus(enum.StrEnum):
    # Values are part of the wire contract; lowercase, no normalization.
    pending = "pending"
    processing = "processing"
    shipped = "shipped"
    delivered = "delivered"
    cancelled = "cancelled"


ORDER_STATUSES: frozenset[str] = frozenset(s.value for s in OrderStatus)


def is_valid_status(value: object) -> bool:
    """
    Membership check against the fixed status set.
    Case-sensitive: "Shipped" and "" are rejected.
    """

    return isinstance(value, str) and value in ORDER_STATUSES


@dataclass(frozen=True, slots=True)
class Order:
    id: int
    user_id: int
    product: str
    quantity: int
    price: float
    status: OrderStatus
    created: datetime

    def with_status(self, status: OrderStatus) -> Order:
        return replace(self, status=status)


@dataclass(frozen=True, slots=True)
class User:
    id: int
    name: str
    email: str
    created: datetime


@dataclass(frozen=True, slots=True)
class UserSummary:
    """
    User details as seen from the order service (no creation timestamp).
    """

    id: int
    name: str
    email: str


@dataclass(frozen=True, slots=True)
class EnrichedOrder:
    order: Order
    # None means enrichment was unavailable; callers omit the user fields.
    user: UserSummary | None = None


# --- Module Notes -----------------------------------------------------------
# Records are frozen so a reference handed out by a store can never be torn by a
# concurrent writer; writers swap in a new record under the store's write lock.
