"""
Data store provisioning.
"""
import threading
from typing import Optional

from spice_haven.db.seed import create_store
from spice_haven.db.store import DataStore

_store: Optional[DataStore] = None
_store_lock = threading.Lock()


def get_store() -> DataStore:
    """Dependency that provides the process-wide data store, built and seeded on first use."""
    global _store
    if _store is None:
        with _store_lock:
            if _store is None:
                _store = create_store()
    return _store

