"""
registry_services.api

HTTP layer for the order and user services.

Responsibilities:
- App factories, routers, dependency wiring and error mapping.
"""

# Package marker.
