"""Validation entry points and pydantic error classification."""

import logging
from typing import Any, Dict, Generic, Iterable, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

from c2h.config import get_settings
from c2h.errors import IssueKind, SchemaValidationError, ValidationIssue
from c2h.schemas import ENTITY_SCHEMAS

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Error types not listed here are shape errors
ERROR_KINDS: Dict[str, IssueKind] = {
    "enum": IssueKind.ENUM,
    "url_format": IssueKind.FORMAT,
    "datetime_format": IssueKind.FORMAT,
    "date_format": IssueKind.FORMAT,
    "string_pattern_mismatch": IssueKind.RANGE,
    "greater_than": IssueKind.RANGE,
    "greater_than_equal": IssueKind.RANGE,
    "less_than": IssueKind.RANGE,
    "less_than_equal": IssueKind.RANGE,
    "too_short": IssueKind.RANGE,
    "too_long": IssueKind.RANGE,
    "string_too_short": IssueKind.RANGE,
    "string_too_long": IssueKind.RANGE,
}


def classify(error: Mapping[str, Any], include_input: Optional[bool] = None) -> ValidationIssue:
    """Turn one pydantic error dict into a ValidationIssue."""
    if include_input is None:
        include_input = get_settings().error_include_input
    code = error["type"]
    ctx = error.get("ctx") or {}
    allowed = ctx.get("allowed")
    return ValidationIssue(
        path=list(error.get("loc", ())),
        kind=ERROR_KINDS.get(code, IssueKind.SHAPE),
        code=code,
        message=error["msg"],
        allowed=list(allowed) if allowed is not None else None,
        input=error.get("input") if include_input else None,
    )


def issues_from(errors: Iterable[Mapping[str, Any]]) -> List[ValidationIssue]:
    return [classify(error) for error in errors]


class ValidationResult(Generic[ModelT]):
    """Outcome of ``check``: either a parsed value or the issues found."""

    def __init__(self, value: Optional[ModelT] = None, issues: Optional[List[ValidationIssue]] = None):
        self.value = value
        self.issues = issues or []

    @property
    def ok(self) -> bool:
        return not self.issues

    def raise_for_issues(self) -> ModelT:
        if not self.ok:
            raise SchemaValidationError(self.issues)
        return self.value

    def __repr__(self) -> str:
        if self.ok:
            return f"<ValidationResult(ok, value={type(self.value).__name__})>"
        return f"<ValidationResult(issues={len(self.issues)})>"


def validate(model: Type[ModelT], data: Any) -> ModelT:
    """Parse ``data`` into ``model`` or raise SchemaValidationError."""
    try:
        return model.model_validate(data)
    except ValidationError as exc:
        issues = issues_from(exc.errors(include_url=False))
        logger.debug("%s rejected with %d issue(s)", model.__name__, len(issues))
        raise SchemaValidationError(issues, model.__name__) from exc


def check(model: Type[ModelT], data: Any) -> ValidationResult[ModelT]:
    """Like ``validate`` but reports issues instead of raising."""
    try:
        return ValidationResult(value=validate(model, data))
    except SchemaValidationError as exc:
        return ValidationResult(issues=exc.issues)


def schema_for(entity: str, shape: str = "read") -> Type[BaseModel]:
    """Look up the model registered for an entity and shape."""
    shapes = ENTITY_SCHEMAS.get(entity)
    if shapes is None:
        raise KeyError(f"Unknown entity: {entity!r}")
    model = shapes.get(shape)
    if model is None:
        raise KeyError(f"Entity {entity!r} has no {shape!r} shape")
    return model


def validate_entity(entity: str, data: Any, shape: str = "read") -> BaseModel:
    """Validate ``data`` against the named entity's read/create/update shape."""
    return validate(schema_for(entity, shape), data)
