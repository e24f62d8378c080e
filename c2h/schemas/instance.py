"""Object (template instance) schemas."""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import Field, StrictStr

from c2h.schemas.common import DateTimeStr, Omittable, UpdateModel, WireModel, closed_enum


class ObjectStatus(str, Enum):
    """Approval lifecycle states of an object."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    CHANGES_REQUESTED = "changes_requested"
    IN_PROGRESS = "in_progress"


ObjectStatusValue = closed_enum(ObjectStatus)


class _ObjectFields(WireModel):
    template_id: StrictStr
    workspace_id: StrictStr
    folder_id: Optional[StrictStr] = Field(...)
    # Keyed by field id; checked against the template in services.field_values
    data: Dict[str, Any]
    metadata: Dict[str, Any] = Field(default_factory=dict)
    created_by: Optional[StrictStr] = Field(..., description="Creating user, null for system-created objects")


class ObjectCreate(_ObjectFields):
    """Schema for creating a new object. Status starts server-side."""


class C2HObject(_ObjectFields):
    """One template instance moving through approval."""
    id: StrictStr
    status: ObjectStatusValue
    # Independent of the owning template's version
    version: int = Field(1, ge=1, strict=True)
    created_at: DateTimeStr
    updated_at: DateTimeStr


class ObjectUpdate(UpdateModel):
    """Schema for editing an object's content or location."""
    folder_id: Optional[StrictStr] = None
    data: Omittable[Dict[str, Any]] = None
    metadata: Omittable[Dict[str, Any]] = None
