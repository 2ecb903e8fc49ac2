"""
registry_services.services.order_service

Order lifecycle service.

Responsibilities:
- Create orders after validating the draft (no partial writes on bad input).
- Read and list orders, optionally filtered by owning user.
- Apply status changes restricted to the fixed status set.
- Compose single-order reads with best-effort user details.
"""

from __future__ import annotations

from registry_services.clients.user_directory import Enriched, UserDirectoryClient
from registry_services.domain.models import EnrichedOrder, Order, OrderStatus
from registry_services.domain.validation import parse_status, validate_order_draft
from registry_services.observability.logging import get_logger
from registry_services.observability.metrics import MetricsRecorder
from registry_services.store.registries import OrderStore

log = get_logger(__name__)


class OrderService:
    def __init__(
        self,
        *,
        store: OrderStore,
        users: UserDirectoryClient,
        recorder: MetricsRecorder,
    ) -> None:
        self._store = store
        self._users = users
        self._recorder = recorder

    def create(self, *, user_id: int, product: str, quantity: int, price: float) -> Order:
        # user_id is not checked against the user registry.
        validate_order_draft(user_id=user_id, product=product, quantity=quantity, price=price)
        order = self._store.create_order(
            user_id=user_id, product=product, quantity=quantity, price=price
        )
        self._recorder.count_order_status(order.status.value)
        log.info("order_created", order_id=order.id, user_id=user_id)
        return order

    def get(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def list_orders(self, *, user_id: int | None = None) -> list[Order]:
        if user_id is None:
            return self._store.list_all()
        return self._store.list_by_user(user_id)

    def update_status(self, order_id: int, status: str) -> bool:
        """
        Any status may move to any other; only membership is enforced.
        Raises ValidationFailure for an unknown status, returns False for an unknown order.
        """

        new_status: OrderStatus = parse_status(status)
        if not self._store.update_status(order_id, new_status):
            return False
        self._recorder.count_order_status(new_status.value)
        log.info("order_status_updated", order_id=order_id, status=new_status.value)
        return True

    async def get_enriched(self, order_id: int) -> EnrichedOrder | None:
        # The store lock is released before the remote call is made.
        order = self._store.get(order_id)
        if order is None:
            return None
        lookup = await self._users.lookup(order.user_id)
        if isinstance(lookup, Enriched):
            return EnrichedOrder(order=order, user=lookup.user)
        return EnrichedOrder(order=order)
