"""API route modules."""

from fastapi import FastAPI

from layout import SprintOverflow

from . import dependencies, health


def register_routes(app: FastAPI, overflow: SprintOverflow = SprintOverflow.KEEP):
    """Register all API routers. overflow is the default sprint overflow policy for this app."""
    app.state.sprint_overflow = overflow

    app.include_router(dependencies.router, prefix="/api/dependencies", tags=["dependencies"])
    app.include_router(health.router, prefix="/api/health", tags=["health"])
