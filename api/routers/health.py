"""
Health check router.

This router provides the liveness endpoint used by monitoring and load
balancers. It needs no authentication and does not touch the record store.
"""

import logging

from fastapi import APIRouter

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Health"],
)


@router.get("/health")
def health():
    """
    Simple liveness endpoint for fittrack-api.

    Returns:
        dict: Status indicator for health checks
    """
    return {"status": "ok"}
