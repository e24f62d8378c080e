"""Workflow actions a template allows on its objects."""

from enum import Enum

from pydantic import StrictBool, StrictStr

from c2h.schemas.common import Omittable, WireModel, closed_enum


class ActionType(str, Enum):
    """Types of workflow actions."""
    APPROVE = "approve"
    REJECT = "reject"
    REQUEST_CHANGES = "request_changes"
    COMMENT = "comment"
    EDIT = "edit"
    VIEW = "view"


class ActionColor(str, Enum):
    GREEN = "green"
    RED = "red"
    YELLOW = "yellow"
    BLUE = "blue"
    GRAY = "gray"


ActionTypeValue = closed_enum(ActionType)
ActionColorValue = closed_enum(ActionColor)


class TemplateAction(WireModel):
    """Schema for one action button defined on a template."""
    id: StrictStr
    type: ActionTypeValue
    label: StrictStr
    description: Omittable[StrictStr] = None
    requires_comment: StrictBool = False
    allow_edit: StrictBool = False
    color: ActionColorValue = ActionColor.BLUE
    webhook_enabled: StrictBool = True
