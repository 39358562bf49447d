"""
Gym super-admin application code.

- services: Business logic (pricing settings)
- routers: HTTP endpoints
- schemas: Request/response models
- config: Application settings

Uses generic infrastructure from the common/ package.
"""

from app.config import settings

__all__ = ["settings"]
