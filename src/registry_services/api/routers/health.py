"""
registry_services.api.routers.health

Health and metrics endpoints shared by both services.

Responsibilities:
- Provide a liveness probe (`/health`) naming the serving service.
- Expose the app's own Prometheus registry (`/metrics`).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from registry_services.api.deps import recorder_dep, service_name_dep
from registry_services.observability.metrics import PrometheusRecorder

router = APIRouter()


@router.get("/health")
async def health(service_name: str = Depends(service_name_dep)) -> dict[str, str]:
    return {"status": "healthy", "service": service_name}


@router.get("/metrics", include_in_schema=False)
async def metrics(recorder: PrometheusRecorder = Depends(recorder_dep)) -> Response:
    return Response(content=recorder.render(), media_type=recorder.content_type)
