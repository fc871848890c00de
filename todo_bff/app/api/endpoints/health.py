"""
Liveness endpoint.

``GET /health`` answers as long as the process is serving requests.
It performs no checks against the store, which cannot fail.
"""

from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter

router = APIRouter()


@router.get("/health", response_model=Dict[str, str], summary="Liveness check")
async def health() -> Dict[str, str]:
    """Return ``{"status": "OK"}`` with the current server time."""
    return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}
