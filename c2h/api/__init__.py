"""Helpers for HTTP layers that return the ApiResponse envelope."""

from c2h.api.responses import fail, from_validation_error, from_workflow_error, ok
from c2h.api.handlers import register_exception_handlers

__all__ = [
    "ok",
    "fail",
    "from_validation_error",
    "from_workflow_error",
    "register_exception_handlers",
]
