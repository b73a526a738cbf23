"""
API module - routes.
Routes are split by domain: dependencies, health.
"""

from .routes import register_routes

__all__ = ["register_routes"]
