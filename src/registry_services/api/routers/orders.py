"""
registry_services.api.routers.orders

Order registry endpoints.

Responsibilities:
- Map query/path/body inputs to `OrderService` calls.
- Map None/False results to 404 and validation failures to 400.
- Serialize enriched reads, omitting user fields when enrichment is unavailable.
"""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field
from starlette.status import HTTP_201_CREATED, HTTP_400_BAD_REQUEST, HTTP_404_NOT_FOUND

from registry_services.api.deps import order_service_dep
from registry_services.domain.models import EnrichedOrder, Order
from registry_services.domain.validation import ValidationFailure
from registry_services.services.order_service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])


class CreateOrderRequest(BaseModel):
    # Missing fields default to zero values and are rejected by domain validation.
    user_id: int = 0
    product: str = ""
    quantity: int = 0
    price: float = Field(default=0.0, allow_inf_nan=False)


class UpdateStatusRequest(BaseModel):
    status: str = ""


class OrderResponse(BaseModel):
    id: int
    user_id: int
    product: str
    quantity: int
    price: float
    status: str
    created: datetime

    @classmethod
    def from_order(cls, order: Order) -> OrderResponse:
        return cls(
            id=order.id,
            user_id=order.user_id,
            product=order.product,
            quantity=order.quantity,
            price=order.price,
            status=order.status.value,
            created=order.created,
        )


class EnrichedOrderResponse(OrderResponse):
    user_name: str | None = None
    user_email: str | None = None

    @classmethod
    def from_enriched(cls, enriched: EnrichedOrder) -> EnrichedOrderResponse:
        base = OrderResponse.from_order(enriched.order).model_dump()
        if enriched.user is None:
            return cls(**base)
        return cls(**base, user_name=enriched.user.name, user_email=enriched.user.email)


@router.get("", response_model=list[OrderResponse])
async def list_orders(
    user_id: str | None = Query(default=None),
    svc: OrderService = Depends(order_service_dep),
) -> list[OrderResponse]:
    # Absent or empty user_id means "list all".
    owner: int | None = None
    if user_id:
        try:
            owner = int(user_id)
        except ValueError as e:
            raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail="Invalid user ID") from e
    return [OrderResponse.from_order(o) for o in svc.list_orders(user_id=owner)]


@router.get(
    "/{order_id}",
    response_model=EnrichedOrderResponse,
    response_model_exclude_none=True,
)
async def get_order(
    order_id: int,
    svc: OrderService = Depends(order_service_dep),
) -> EnrichedOrderResponse:
    enriched = await svc.get_enriched(order_id)
    if enriched is None:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Order not found")
    return EnrichedOrderResponse.from_enriched(enriched)


@router.post("", response_model=OrderResponse, status_code=HTTP_201_CREATED)
async def create_order(
    body: CreateOrderRequest,
    svc: OrderService = Depends(order_service_dep),
) -> OrderResponse:
    try:
        order = svc.create(
            user_id=body.user_id,
            product=body.product,
            quantity=body.quantity,
            price=body.price,
        )
    except ValidationFailure as e:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=str(e)) from e
    return OrderResponse.from_order(order)


@router.put("/{order_id}/status")
async def update_order_status(
    order_id: int,
    body: UpdateStatusRequest,
    svc: OrderService = Depends(order_service_dep),
) -> dict[str, str]:
    try:
        updated = svc.update_status(order_id, body.status)
    except ValidationFailure as e:
        raise HTTPException(status_code=HTTP_400_BAD_REQUEST, detail=str(e)) from e
    if not updated:
        raise HTTPException(status_code=HTTP_404_NOT_FOUND, detail="Order not found")
    return {"status": "updated"}


# --- Module Notes -----------------------------------------------------------
# Enrichment problems never surface here: get_enriched always returns the order
# when it exists, with or without user details.
