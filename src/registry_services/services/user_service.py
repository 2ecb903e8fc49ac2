"""
registry_services.services.user_service

User registry service.

Responsibilities:
- Create users after checking that name and email are present.
- Read single users and list all of them.
"""

from __future__ import annotations

from registry_services.domain.models import User
from registry_services.domain.validation import validate_user_draft
from registry_services.observability.logging import get_logger
from registry_services.store.registries import UserStore

log = get_logger(__name__)


class UserService:
    def __init__(self, *, store: UserStore) -> None:
        self._store = store

    def create(self, *, name: str, email: str) -> User:
        # Email format is not checked, only presence.
        validate_user_draft(name=name, email=email)
        user = self._store.create_user(name=name, email=email)
        log.info("user_created", user_id=user.id)
        return user

    def get(self, user_id: int) -> User | None:
        return self._store.get(user_id)

    def list_users(self) -> list[User]:
        return self._store.list_all()
