"""
Dependencies Backend - FastAPI entry point.
Serves the cross-team dependency layout for the planning frontend.

Environment:
  DEPS_HOST              bind host (default 127.0.0.1)
  DEPS_PORT              bind port (default 3001)
  DEPS_SPRINT_OVERFLOW   keep | backlog (default keep)
"""

import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from api import register_routes
from visualization import parse_overflow

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 3001


def create_app(overflow=None) -> FastAPI:
    """Build the app. overflow: sprint overflow policy; None reads DEPS_SPRINT_OVERFLOW."""
    if overflow is None:
        overflow = os.environ.get("DEPS_SPRINT_OVERFLOW")
    policy = parse_overflow(overflow)

    app = FastAPI(title="Dependencies Backend")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_routes(app, policy)
    logger.info("Dependencies backend ready (sprint overflow: {})", policy.value)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        app,
        host=os.environ.get("DEPS_HOST", DEFAULT_HOST),
        port=int(os.environ.get("DEPS_PORT", DEFAULT_PORT)),
    )
