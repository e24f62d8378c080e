"""Error types reported by the validation layer."""

from enum import Enum
from typing import Any, Dict, List, Optional, Sequence, Union

from pydantic import BaseModel


class IssueKind(str, Enum):
    """Broad classes of validation failure."""
    SHAPE = "shape"    # wrong type, missing or unknown key
    ENUM = "enum"      # value outside a closed set
    FORMAT = "format"  # malformed URL or date-time
    RANGE = "range"    # value outside min/max or not matching a pattern


class ValidationIssue(BaseModel):
    """One violated constraint at one location of the input."""
    path: List[Union[str, int]]
    kind: IssueKind
    code: str
    message: str
    allowed: Optional[List[str]] = None
    input: Optional[Any] = None

    @property
    def location(self) -> str:
        """Dotted form of ``path``, e.g. ``fieldSchema.0.type``."""
        return ".".join(str(part) for part in self.path) or "<root>"


class SchemaValidationError(Exception):
    """Raised when input does not conform to a schema.

    Carries every issue found, not only the first.
    """

    def __init__(self, issues: Sequence[ValidationIssue], model_name: Optional[str] = None):
        self.issues = list(issues)
        self.model_name = model_name
        subject = model_name or "input"
        summary = "; ".join(f"{issue.location}: {issue.message}" for issue in self.issues[:3])
        if len(self.issues) > 3:
            summary += f"; and {len(self.issues) - 3} more"
        super().__init__(f"{len(self.issues)} validation issue(s) in {subject}: {summary}")

    def kinds(self) -> List[IssueKind]:
        return [issue.kind for issue in self.issues]

    def to_details(self) -> Dict[str, Any]:
        """Issue list in the shape used by ApiResponse.error.details."""
        details: Dict[str, Any] = {
            "issues": [issue.model_dump(mode="json", exclude_none=True) for issue in self.issues]
        }
        if self.model_name:
            details["schema"] = self.model_name
        return details


class WorkflowError(Exception):
    """Raised when an operation breaks an approval workflow rule."""

    def __init__(self, code: str, message: str):
        self.code = code
        self.message = message
        super().__init__(message)
