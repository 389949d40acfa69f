"""API Routes"""
from prompt_schema.api.routes.requests import router as requests_router
from prompt_schema.api.routes.health import router as health_router

__all__ = ["requests_router", "health_router"]
