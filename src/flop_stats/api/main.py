"""Primary API routes."""

from __future__ import annotations

from fastapi import APIRouter

from flop_stats import __version__
from flop_stats.config import build_data_paths

router = APIRouter(prefix="/api", tags=["core"])


@router.get("/health", summary="Service health check")
async def health() -> dict[str, str]:
    """Return a simple health payload for uptime checks."""

    return {"status": "ok"}


@router.get("/metadata", summary="Metadata about the service")
async def metadata() -> dict[str, object]:
    """Expose lightweight build metadata and whether solver data is mounted."""

    return {
        "service": "Flop Stats",
        "version": __version__,
        "description": "Averaged solver statistics for textured flop subsets.",
        "data_available": build_data_paths().is_available(),
    }
