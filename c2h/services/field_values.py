"""Check an object's data against the field definitions of its template."""

import logging
import re
from typing import Any, List, Mapping, Optional, Sequence

from c2h.errors import IssueKind, SchemaValidationError, ValidationIssue
from c2h.schemas.common import is_iso_date, is_iso_datetime
from c2h.schemas.field import FieldType, TemplateField
from c2h.schemas.template import Template

logger = logging.getLogger(__name__)

STRING_FIELD_TYPES = frozenset({FieldType.TEXT, FieldType.TEXTAREA, FieldType.MARKDOWN})


def _issue(path, kind, code, message, allowed=None) -> ValidationIssue:
    return ValidationIssue(path=list(path), kind=kind, code=code, message=message, allowed=allowed)


def _is_empty(value: Any) -> bool:
    return value is None or value == "" or value == [] or value == {}


def _is_date(value: str) -> bool:
    return is_iso_date(value) or is_iso_datetime(value)


def _check_type(field: TemplateField, value: Any, path: list) -> List[ValidationIssue]:
    """Type check a single non-empty value."""
    kind = field.type
    if kind in STRING_FIELD_TYPES:
        if not isinstance(value, str):
            return [_issue(path, IssueKind.SHAPE, "string_type", "Input should be a valid string")]
    elif kind == FieldType.CHECKBOX:
        if not isinstance(value, bool):
            return [_issue(path, IssueKind.SHAPE, "bool_type", "Input should be a valid boolean")]
    elif kind == FieldType.DATE:
        if not isinstance(value, str):
            return [_issue(path, IssueKind.SHAPE, "string_type", "Input should be a valid string")]
        if not _is_date(value):
            return [_issue(path, IssueKind.FORMAT, "date_format",
                           "Input should be an ISO-8601 date or date-time string")]
    elif kind == FieldType.FILE:
        if not isinstance(value, (str, dict)):
            return [_issue(path, IssueKind.SHAPE, "file_type",
                           "Input should be a file reference string or file metadata object")]
    elif kind == FieldType.ARRAY:
        if not isinstance(value, list):
            return [_issue(path, IssueKind.SHAPE, "list_type", "Input should be a valid list")]
    elif kind == FieldType.SELECT:
        allowed = [option.value for option in field.options or []]
        if value not in allowed:
            return [_issue(path, IssueKind.ENUM, "enum",
                           f"Input should be one of {', '.join(map(repr, allowed))}", allowed)]
    elif kind == FieldType.MULTISELECT:
        if not isinstance(value, list):
            return [_issue(path, IssueKind.SHAPE, "list_type", "Input should be a valid list")]
        allowed = [option.value for option in field.options or []]
        return [
            _issue(path + [index], IssueKind.ENUM, "enum",
                   f"Input should be one of {', '.join(map(repr, allowed))}", allowed)
            for index, item in enumerate(value)
            if item not in allowed
        ]
    return []


def _check_constraints(
    field: TemplateField, value: Any, path: list, index: int
) -> List[ValidationIssue]:
    rules = field.validation
    if rules is None:
        return []
    issues: List[ValidationIssue] = []

    if isinstance(value, (str, list)):
        unit = "characters" if isinstance(value, str) else "items"
        size = len(value)
        if rules.min is not None and size < rules.min:
            issues.append(_issue(path, IssueKind.RANGE, "too_short",
                                 f"Should have at least {rules.min} {unit}, got {size}"))
        if rules.max is not None and size > rules.max:
            issues.append(_issue(path, IssueKind.RANGE, "too_long",
                                 f"Should have at most {rules.max} {unit}, got {size}"))

    if rules.pattern is not None and isinstance(value, str):
        try:
            compiled = re.compile(rules.pattern)
        except re.error as exc:
            issues.append(_issue(["fieldSchema", index, "validation", "pattern"], IssueKind.SHAPE,
                                 "invalid_pattern", f"Pattern does not compile: {exc}"))
        else:
            if compiled.fullmatch(value) is None:
                issues.append(_issue(path, IssueKind.RANGE, "string_pattern_mismatch",
                                     f"String should match pattern '{rules.pattern}'"))
    return issues


def validate_object_data(
    fields: Sequence[TemplateField], data: Mapping[str, Any]
) -> List[ValidationIssue]:
    """
    Report every way ``data`` breaks the given field definitions.

    Paths are rooted at ``data`` so they line up with the object payload.
    """
    issues: List[ValidationIssue] = []
    known = {field.id for field in fields}

    for key in data:
        if key not in known:
            issues.append(_issue(["data", key], IssueKind.SHAPE, "unknown_field",
                                 f"Template defines no field '{key}'"))

    for index, field in enumerate(fields):
        path: list = ["data", field.id]
        value = data.get(field.id)
        if _is_empty(value):
            if field.required:
                issues.append(_issue(path, IssueKind.SHAPE, "missing",
                                     f"Field '{field.label}' is required"))
            continue
        type_issues = _check_type(field, value, path)
        if type_issues:
            issues.extend(type_issues)
            continue
        issues.extend(_check_constraints(field, value, path, index))

    return issues


def check_object_data(template: Template, data: Mapping[str, Any], model_name: Optional[str] = None) -> None:
    """Raise SchemaValidationError if ``data`` does not fit ``template``."""
    issues = validate_object_data(template.field_schema, data)
    if issues:
        logger.debug("Object data rejected for template %s with %d issue(s)", template.id, len(issues))
        raise SchemaValidationError(issues, model_name or f"Template {template.id} data")
