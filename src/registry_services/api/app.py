"""
registry_services.api.app

FastAPI app factories for the order and user services.

Responsibilities:
- Build each FastAPI application and register routers/middleware/error handlers.
- Own shared infrastructure per app (store, metrics recorder, outbound http client).
- Provide a single composition root where cross-cutting concerns live.
"""

from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable, Sequence
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from registry_services import __version__
from registry_services.api.errors import register_error_handlers
from registry_services.api.routers.health import router as health_router
from registry_services.api.routers.orders import router as orders_router
from registry_services.api.routers.users import router as users_router
from registry_services.clients.user_directory import UserDirectoryClient
from registry_services.observability.logging import configure_logging, get_logger
from registry_services.observability.metrics import PrometheusRecorder
from registry_services.observability.middleware import (
    RequestContextMiddleware,
    RequestMetricsMiddleware,
)
from registry_services.services.order_service import OrderService
from registry_services.services.user_service import UserService
from registry_services.settings import Settings
from registry_services.store.registries import OrderStore, UserStore

log = get_logger(__name__)

ORDER_SERVICE_NAME = "order-service"
USER_SERVICE_NAME = "user-service"


def create_order_app(
    *,
    settings: Settings,
    store: OrderStore | None = None,
    http: httpx.AsyncClient | None = None,
    recorder: PrometheusRecorder | None = None,
) -> FastAPI:
    recorder = recorder or PrometheusRecorder()
    store = store or OrderStore(seed=settings.seed_fixtures)

    # An injected client (tests, in-process sibling) belongs to the caller and is not closed here.
    closers: list[Callable[[], Awaitable[None]]] = []
    if http is None:
        http = httpx.AsyncClient(
            base_url=settings.user_service_base_url,
            timeout=settings.user_lookup_timeout_seconds,
        )
        closers.append(http.aclose)

    app = _build_app(
        settings=settings,
        service_name=ORDER_SERVICE_NAME,
        title="Order Service",
        recorder=recorder,
        on_shutdown=closers,
    )
    app.state.order_service = OrderService(
        store=store,
        users=UserDirectoryClient(http=http, timeout_seconds=settings.user_lookup_timeout_seconds),
        recorder=recorder,
    )
    app.include_router(orders_router)
    return app


def create_user_app(
    *,
    settings: Settings,
    store: UserStore | None = None,
    recorder: PrometheusRecorder | None = None,
) -> FastAPI:
    recorder = recorder or PrometheusRecorder()
    store = store or UserStore(seed=settings.seed_fixtures)

    app = _build_app(
        settings=settings,
        service_name=USER_SERVICE_NAME,
        title="User Service",
        recorder=recorder,
    )
    app.state.user_service = UserService(store=store)
    app.include_router(users_router)
    return app


def _build_app(
    *,
    settings: Settings,
    service_name: str,
    title: str,
    recorder: PrometheusRecorder,
    on_shutdown: Sequence[Callable[[], Awaitable[None]]] = (),
) -> FastAPI:
    # Configure structured logging once per app, before it serves requests.
    configure_logging(service_name=service_name, level=settings.log_level)

    @asynccontextmanager
    async def lifespan(_: FastAPI) -> AsyncIterator[None]:
        log.info("startup", env=settings.env)
        try:
            yield
        finally:
            for close in on_shutdown:
                await close()
            log.info("shutdown")

    app = FastAPI(
        title=title,
        version=__version__,
        docs_url="/docs",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.service_name = service_name
    app.state.recorder = recorder

    register_error_handlers(app)

    # Last added runs outermost: request context, then metrics, then CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST", "PUT", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )
    app.add_middleware(RequestMetricsMiddleware, recorder=recorder)
    app.add_middleware(RequestContextMiddleware)

    app.include_router(health_router, tags=["health"])
    return app


# --- Module Notes -----------------------------------------------------------
# Business rules live in services/ and store/; this module only wires them together.
