# This file makes the 'routes' directory a Python package.

from fastapi import APIRouter

from kidcode.core.config import settings

from .auth_routes import router as auth_router
from .lesson_routes import router as lesson_router
from .catalog_routes import router as catalog_router
from .learning_routes import router as learning_router

# Main API router; everything is served under settings.API_PREFIX (default /api)
api_router = APIRouter(prefix=settings.API_PREFIX)

api_router.include_router(auth_router)
api_router.include_router(lesson_router)
api_router.include_router(catalog_router)
api_router.include_router(learning_router)

__all__ = [
    "api_router" # Export the main router
]
