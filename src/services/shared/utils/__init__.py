from .auth import get_account_id, get_display_name
from .http_response import (
    api_response,
    domain_error_response,
    error_response,
    validation_error_response,
)
from .logger import get_logger
from .validators import to_decimal, to_index

__all__ = [
    "api_response",
    "error_response",
    "domain_error_response",
    "validation_error_response",
    "get_account_id",
    "get_display_name",
    "get_logger",
    "to_decimal",
    "to_index",
]
