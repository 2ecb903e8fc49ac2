"""
registry_services.domain.validation

Input validation for records about to be written.

Responsibilities:
- Reject malformed order/user drafts and unknown statuses before any store call.
"""

from __future__ import annotations

import math

from registry_services.domain.models import OrderStatus, is_valid_status


class ValidationFailure(ValueError):
    """
    Caller supplied input that cannot be stored. Maps to a 400 at the API layer.
    """


def validate_order_draft(*, user_id: int, product: str, quantity: int, price: float) -> None:
    # isfinite also rejects NaN and the inf a JSON literal like 1e400 decodes to.
    if user_id <= 0 or not product or quantity <= 0 or not math.isfinite(price) or price <= 0:
        raise ValidationFailure("All fields are required and must be valid")


def validate_user_draft(*, name: str, email: str) -> None:
    if not name or not email:
        raise ValidationFailure("Name and email are required")


def parse_status(value: str) -> OrderStatus:
    if not is_valid_status(value):
        raise ValidationFailure("Invalid status")
    return OrderStatus(value)
