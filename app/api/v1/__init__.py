"""API v1: versioned REST routes."""

from app.api.v1.router import api_router

__all__ = ["api_router"]
