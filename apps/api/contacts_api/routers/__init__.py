"""API routers."""

from contacts_api.routers.auth import router as auth_router
from contacts_api.routers.contacts import router as contacts_router
from contacts_api.routers.dashboard import router as dashboard_router

__all__ = [
    "auth_router",
    "contacts_router",
    "dashboard_router",
]
