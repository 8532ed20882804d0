"""Routery aplikacji."""

from .admin import router as admin_router
from .auth import router as auth_router
from .registration import router as registration_router

__all__ = ["admin_router", "auth_router", "registration_router"]
