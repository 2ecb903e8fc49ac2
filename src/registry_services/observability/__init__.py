"""
registry_services.observability

Observability package.

Responsibilities:
- Structured logging configuration.
- Request context propagation for consistent log enrichment.
- Per-app metrics recording behind an injectable recorder.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing here holds module-level metric state; recorders are created per app.
