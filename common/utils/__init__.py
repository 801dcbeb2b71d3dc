"""
Utilities module - Common helpers for API responses and exceptions.
"""

from common.utils.responses import success_response, error_response
from common.utils.exceptions import (
    APIException,
    BadRequestException,
    UnauthorizedException,
    InternalServerException,
    ServiceUnavailableException,
)

__all__ = [
    "success_response",
    "error_response",
    "APIException",
    "BadRequestException",
    "UnauthorizedException",
    "InternalServerException",
    "ServiceUnavailableException",
]
