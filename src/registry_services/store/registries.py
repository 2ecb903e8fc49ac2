"""
registry_services.store.registries

Concrete stores for the two resource types.

Responsibilities:
- Typed create/read/list/update operations on top of `ResourceStore`.
- Seed each store with its two fixture records (first caller-assignable id is 3).
"""

from __future__ import annotations

from registry_services.domain.models import Order, OrderStatus, User, is_valid_status
from registry_services.store.resource_store import ResourceStore


class OrderStore(ResourceStore[Order]):
    def __init__(self, *, seed: bool = True) -> None:
        super().__init__()
        if seed:
            self.create_order(user_id=1, product="Laptop", quantity=1, price=999.99)
            self.create_order(user_id=2, product="Mouse", quantity=2, price=25.00)

    def create_order(self, *, user_id: int, product: str, quantity: int, price: float) -> Order:
        # Inputs are validated by the service layer; the store only allocates and stores.
        return self.create(
            lambda order_id, created: Order(
                id=order_id,
                user_id=user_id,
                product=product,
                quantity=quantity,
                price=price,
                status=OrderStatus.pending,
                created=created,
            )
        )

    def list_by_user(self, user_id: int) -> list[Order]:
        return self.list_where(lambda o: o.user_id == user_id)

    def update_status(self, order_id: int, status: str) -> bool:
        # Nothing outside the status set is ever persisted.
        if not is_valid_status(status):
            return False
        new_status = OrderStatus(status)
        return self.replace(order_id, lambda o: o.with_status(new_status))


class UserStore(ResourceStore[User]):
    def __init__(self, *, seed: bool = True) -> None:
        super().__init__()
        if seed:
            self.create_user(name="John Doe", email="john@example.com")
            self.create_user(name="Jane Smith", email="jane@example.com")

    def create_user(self, *, name: str, email: str) -> User:
        return self.create(
            lambda user_id, created: User(id=user_id, name=name, email=email, created=created)
        )


# --- Module Notes -----------------------------------------------------------
# Each store instance has its own lock; creating an order never touches the user store.
