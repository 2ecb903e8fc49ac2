"""
registry_services.services

Service layer.

Responsibilities:
- Validate inputs before any store write.
- Coordinate stores, the user directory client, metrics and logging.
"""

# Package marker.
