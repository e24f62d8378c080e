"""Envelope builders."""

from typing import Any, Dict, Optional

from c2h.errors import SchemaValidationError, WorkflowError
from c2h.schemas.api import ApiError, ApiResponse, PageMeta

VALIDATION_ERROR = "validation_error"


def ok(data: Any = None, page: Optional[int] = None, limit: Optional[int] = None,
       total: Optional[int] = None) -> ApiResponse:
    """Successful envelope, with pagination meta when any of its parts is given."""
    fields: Dict[str, Any] = {"success": True}
    if data is not None:
        fields["data"] = data
    paging = {key: value for key, value in (("page", page), ("limit", limit), ("total", total))
              if value is not None}
    if paging:
        fields["meta"] = PageMeta(**paging)
    return ApiResponse(**fields)


def fail(code: str, message: str, details: Optional[Dict[str, Any]] = None) -> ApiResponse:
    """Failed envelope."""
    fields: Dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        fields["details"] = details
    return ApiResponse(success=False, error=ApiError(**fields))


def from_validation_error(exc: SchemaValidationError) -> ApiResponse:
    count = len(exc.issues)
    subject = exc.model_name or "request"
    return fail(
        VALIDATION_ERROR,
        f"{subject} failed validation with {count} issue{'s' if count != 1 else ''}",
        exc.to_details(),
    )


def from_workflow_error(exc: WorkflowError) -> ApiResponse:
    return fail(exc.code, exc.message)
