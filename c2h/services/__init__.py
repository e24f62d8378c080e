"""Services built on top of the schemas."""

from c2h.services.validation import ValidationResult, check, validate, validate_entity
from c2h.services.field_values import check_object_data, validate_object_data
from c2h.services.lifecycle import ActionOutcome, ApprovalWorkflow
from c2h.services.comments import CommentThread, build_threads, thread_issues
from c2h.services.webhooks import build_payload, record_delivery, subscribers

__all__ = [
    "ValidationResult",
    "check",
    "validate",
    "validate_entity",
    "check_object_data",
    "validate_object_data",
    "ActionOutcome",
    "ApprovalWorkflow",
    "CommentThread",
    "build_threads",
    "thread_issues",
    "build_payload",
    "record_delivery",
    "subscribers",
]
