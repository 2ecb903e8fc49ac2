"""
registry_services.observability.metrics

Metrics recording behind an injectable recorder.

Responsibilities:
- Define the recorder interface the API layer and services depend on.
- Provide a Prometheus implementation with a private registry per app.
"""

from __future__ import annotations

from typing import Protocol

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)


class MetricsRecorder(Protocol):
    def observe_request(
        self, *, method: str, endpoint: str, status: int, duration_seconds: float
    ) -> None: ...

    def count_order_status(self, status: str) -> None: ...


class PrometheusRecorder:
    """
    Owns its own CollectorRegistry, so several apps (or tests) in one process
    never collide on metric names.
    """

    content_type = CONTENT_TYPE_LATEST

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry or CollectorRegistry()
        self._requests = Counter(
            "http_requests_total",
            "Total number of HTTP requests",
            ["method", "endpoint", "status"],
            registry=self.registry,
        )
        self._duration = Histogram(
            "http_request_duration_seconds",
            "Duration of HTTP requests",
            ["method", "endpoint"],
            registry=self.registry,
        )
        self._orders = Counter(
            "orders_total",
            "Total number of orders entering each status",
            ["status"],
            registry=self.registry,
        )

    def observe_request(
        self, *, method: str, endpoint: str, status: int, duration_seconds: float
    ) -> None:
        self._requests.labels(method=method, endpoint=endpoint, status=str(status)).inc()
        self._duration.labels(method=method, endpoint=endpoint).observe(duration_seconds)

    def count_order_status(self, status: str) -> None:
        self._orders.labels(status=status).inc()

    def render(self) -> bytes:
        return generate_latest(self.registry)
