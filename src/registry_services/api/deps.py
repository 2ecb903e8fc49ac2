"""
registry_services.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Encapsulate app.state access patterns (services, recorder, service name).
"""

from __future__ import annotations

from fastapi import Request

from registry_services.observability.metrics import PrometheusRecorder
from registry_services.services.order_service import OrderService
from registry_services.services.user_service import UserService


def order_service_dep(request: Request) -> OrderService:
    # Built once per app in `registry_services.api.app.create_order_app`.
    return request.app.state.order_service  # type: ignore[attr-defined]


def user_service_dep(request: Request) -> UserService:
    return request.app.state.user_service  # type: ignore[attr-defined]


def recorder_dep(request: Request) -> PrometheusRecorder:
    return request.app.state.recorder  # type: ignore[attr-defined]


def service_name_dep(request: Request) -> str:
    return request.app.state.service_name  # type: ignore[attr-defined]
