"""
Super-admin Schemas.

Pydantic models for request/response validation.
"""

from app.schemas.settings import *
