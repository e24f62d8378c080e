"""Template-related schemas."""

from enum import Enum
from typing import List, Optional

from pydantic import Field, StrictStr

from c2h.schemas.action import TemplateAction
from c2h.schemas.common import DateTimeStr, Omittable, UpdateModel, WireModel, closed_enum
from c2h.schemas.field import TemplateField


class TemplateStatus(str, Enum):
    DRAFT = "draft"
    ACTIVE = "active"
    ARCHIVED = "archived"


TemplateStatusValue = closed_enum(TemplateStatus)


class _TemplateFields(WireModel):
    """Fields a client supplies when creating a template."""
    workspace_id: StrictStr
    folder_id: Optional[StrictStr] = Field(..., description="Containing folder, null for the workspace root")
    name: StrictStr
    description: Omittable[StrictStr] = None
    field_schema: List[TemplateField]
    action_schema: List[TemplateAction]
    status: TemplateStatusValue
    created_by: StrictStr


class TemplateCreate(_TemplateFields):
    """Schema for creating a new template.

    id, version and timestamps are assigned by the persistence layer and are
    rejected here.
    """


class Template(_TemplateFields):
    """A stored, versioned template."""
    id: StrictStr
    version: int = Field(1, ge=1, strict=True)
    created_at: DateTimeStr
    updated_at: DateTimeStr

    def field(self, field_id: str) -> Optional[TemplateField]:
        """Look up a field definition by id."""
        for definition in self.field_schema:
            if definition.id == field_id:
                return definition
        return None


class TemplateUpdate(UpdateModel):
    """Schema for updating a template. Every field is optional."""
    workspace_id: Omittable[StrictStr] = None
    folder_id: Optional[StrictStr] = None
    name: Omittable[StrictStr] = None
    description: Omittable[StrictStr] = None
    field_schema: Omittable[List[TemplateField]] = None
    action_schema: Omittable[List[TemplateAction]] = None
    status: Omittable[TemplateStatusValue] = None
    created_by: Omittable[StrictStr] = None
