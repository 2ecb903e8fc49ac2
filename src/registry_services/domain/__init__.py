"""
registry_services.domain

Domain package.

Responsibilities:
- Record types for orders and users.
- Order status enumeration and draft validation.
"""

# Package marker.
