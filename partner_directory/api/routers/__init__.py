"""API routers."""

from .health import router as health_router
from .partners import router as partners_router

__all__ = ["health_router", "partners_router"]
