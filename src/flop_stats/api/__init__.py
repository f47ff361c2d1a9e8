"""API routers for the flop statistics service."""

from .flop import router as flop_router
from .main import router as core_router

__all__ = ["core_router", "flop_router"]
