"""
Super-admin API Routers.
"""

from app.routers.settings import router as settings_router

__all__ = ["settings_router"]
