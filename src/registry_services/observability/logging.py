"""
registry_services.observability.logging

Structured logging setup shared by the order and user services.

Responsibilities:
- Route structlog events through stdlib logging as one JSON object per line.
- Stamp every event with the emitting service and package version.
- Hand out bound loggers by module name.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, MutableMapping
from typing import Any

import structlog

from registry_services import __version__

EventDict = MutableMapping[str, Any]


def configure_logging(*, service_name: str, level: str) -> None:
    root_level = logging.getLevelName(level.upper())
    if not isinstance(root_level, int):
        root_level = logging.INFO

    # basicConfig is a no-op once the root logger has handlers; the level is applied anyway
    # so a second app built in the same process can still change verbosity.
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=root_level)
    logging.getLogger().setLevel(root_level)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            service_fields(service_name=service_name, version=__version__),
            structlog.processors.dict_tracebacks,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def service_fields(
    *, service_name: str, version: str
) -> Callable[[Any, str, EventDict], EventDict]:
    def processor(_: Any, __: str, event_dict: EventDict) -> EventDict:
        # Explicitly bound values win, e.g. a log line about the sibling service.
        event_dict.setdefault("service", service_name)
        event_dict.setdefault("version", version)
        return event_dict

    return processor


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


# --- Module Notes -----------------------------------------------------------
# Request-scoped fields (request_id, path, method) arrive via contextvars bound in
# `observability.middleware.RequestContextMiddleware`.
