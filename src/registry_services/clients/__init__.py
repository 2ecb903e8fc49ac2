"""
registry_services.clients

Clients for sibling services.

Responsibilities:
- Provide client interfaces for calling the user registry from the order service.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Services depend on this boundary, not on httpx or on the user service routers.
