"""
registry_services.store

In-memory resource stores.

Responsibilities:
- Reader/writer locking for shared collections.
- Generic keyed store with an embedded identifier counter.
- Concrete order and user stores seeded with fixture records.
"""

from registry_services.store.registries import OrderStore, UserStore
from registry_services.store.resource_store import ResourceStore

__all__ = ["OrderStore", "ResourceStore", "UserStore"]
