"""Shared router utilities."""

from .error_handling import handle_api_errors, http_exception_handler, validation_exception_handler

__all__ = ["handle_api_errors", "http_exception_handler", "validation_exception_handler"]
