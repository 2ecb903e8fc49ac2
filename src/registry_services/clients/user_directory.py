"""
registry_services.clients.user_directory

HTTP client boundary used by the order service to enrich order reads with user details.

Responsibilities:
- Make one bounded GET against the user registry's single-user endpoint.
- Synthesize a placeholder user when the registry cannot be reached.
- Report any other failure as `Unavailable` instead of raising.
"""

from __future__ import annotations

from dataclasses import dataclass

import httpx
from pydantic import BaseModel, ValidationError

from registry_services.domain.models import UserSummary
from registry_services.observability.logging import get_logger

log = get_logger(__name__)

DEFAULT_TIMEOUT_SECONDS = 5.0


@dataclass(frozen=True, slots=True)
class Enriched:
    user: UserSummary
    # True when the registry was unreachable and `user` is a generated placeholder.
    synthesized: bool = False


@dataclass(frozen=True, slots=True)
class Unavailable:
    reason: str


UserLookup = Enriched | Unavailable


class _UserPayload(BaseModel):
    # Extra fields (e.g. "created") are ignored.
    id: int
    name: str
    email: str


def placeholder_user(user_id: int) -> UserSummary:
    return UserSummary(id=user_id, name=f"User {user_id}", email=f"user{user_id}@example.com")


class UserDirectoryClient:
    """
    The http client is owned by the caller (app lifespan); this class never closes it.
    """

    def __init__(
        self,
        *,
        http: httpx.AsyncClient,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._http = http
        self._timeout = httpx.Timeout(timeout_seconds)

    async def lookup(self, user_id: int) -> UserLookup:
        try:
            r = await self._http.get(f"/users/{user_id}", timeout=self._timeout)
        except httpx.TransportError as e:
            # Connection refused, DNS failure, timeout: degrade to a generated user.
            log.warning(
                "user_lookup_degraded",
                user_id=user_id,
                reason="transport_error",
                error=type(e).__name__,
            )
            return Enriched(user=placeholder_user(user_id), synthesized=True)
        except httpx.RequestError as e:
            # Reached the registry but could not read its answer (bad content-encoding,
            # redirect loop). Same outcome as an undecodable body.
            log.warning(
                "user_lookup_degraded",
                user_id=user_id,
                reason="undecodable_body",
                error=type(e).__name__,
            )
            return Unavailable(reason="user service returned an undecodable body")

        if not r.is_success:
            log.warning(
                "user_lookup_degraded",
                user_id=user_id,
                reason="error_status",
                status_code=r.status_code,
            )
            return Unavailable(reason=f"user service returned status {r.status_code}")

        try:
            payload = _UserPayload.model_validate_json(r.content)
        except ValidationError:
            log.warning("user_lookup_degraded", user_id=user_id, reason="undecodable_body")
            return Unavailable(reason="user service returned an undecodable body")

        return Enriched(user=UserSummary(id=payload.id, name=payload.name, email=payload.email))


# --- Module Notes -----------------------------------------------------------
# A single attempt per call; no retries. Only transport failures fall back to a
# placeholder. A reachable registry answering non-2xx, or with a body that cannot be
# decoded at any layer, means "omit enrichment".
