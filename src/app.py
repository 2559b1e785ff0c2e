"""Application composition root.

This module wires the HTTP routes into the FastAPI application. Server settings (host, port, log
level) are consumed by the process entrypoint, not by the app itself.
"""

from __future__ import annotations

from fastapi import FastAPI

from src.api.routes import router


def create_app() -> FastAPI:
    """Create the FastAPI application."""

    app = FastAPI(title="Payment Instructions", version="0.1.0")
    app.include_router(router)
    return app
