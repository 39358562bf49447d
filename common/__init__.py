"""
Common library for reusable infrastructure components.

- database: Async MongoDB connection manager (Motor)
- utils: Standard responses, exceptions and exception handlers
- config: Base settings class
"""

from common.database import MongoDB
from common.utils import (
    success_response,
    error_response,
    APIException,
    ServiceUnavailableException,
    ValidationException,
    register_exception_handlers,
)
from common.config import BaseAppSettings

__all__ = [
    # Database
    "MongoDB",
    # Utils
    "success_response",
    "error_response",
    "APIException",
    "ServiceUnavailableException",
    "ValidationException",
    "register_exception_handlers",
    # Config
    "BaseAppSettings",
]
