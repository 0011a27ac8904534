"""
Health check router.
"""
from fastapi import APIRouter, Depends

from spice_haven.db.session import get_store
from spice_haven.db.store import DataStore

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Basic health check - always returns OK."""
    return {"status": "ok"}


@router.get("/api/health")
def api_health_check(store: DataStore = Depends(get_store)):
    """
    Health check including record counts per entity.

    The store is in memory, so counts drop back to the seed data after a restart.
    """
    return {
        "status": "ok",
        "services": {
            "store": {"status": "ok", "records": store.counts()},
        },
    }
