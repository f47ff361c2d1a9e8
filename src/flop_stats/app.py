"""FastAPI application factory for the flop statistics service."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from flop_stats import __version__
from flop_stats.api import core_router, flop_router


def create_app() -> FastAPI:
    app = FastAPI(title="Flop Stats", version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(core_router)
    app.include_router(flop_router)

    return app


app = create_app()


__all__ = ["app", "create_app"]
