"""
Utilities module - Common helpers for API responses, exceptions, and handlers.
"""

from common.utils.responses import success_response, error_response
from common.utils.exceptions import (
    APIException,
    ValidationException,
    ServiceUnavailableException,
)
from common.utils.handlers import register_exception_handlers

__all__ = [
    "success_response",
    "error_response",
    "APIException",
    "ValidationException",
    "ServiceUnavailableException",
    "register_exception_handlers",
]
