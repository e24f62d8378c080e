"""Review activity schemas: performed actions and comments."""

from enum import Enum
from typing import Any, Dict, Optional

from pydantic import ConfigDict, Field, StrictStr

from c2h.schemas.action import ActionTypeValue
from c2h.schemas.common import DateTimeStr, Omittable, UpdateModel, WireModel, closed_enum


class WebhookDeliveryStatus(str, Enum):
    PENDING = "pending"
    DELIVERED = "delivered"
    FAILED = "failed"


WebhookDeliveryStatusValue = closed_enum(WebhookDeliveryStatus)


class ObjectActionCreate(WireModel):
    """Schema for recording an action; the timestamp is set on persist."""
    object_id: StrictStr
    action_type: ActionTypeValue
    action_data: Omittable[Dict[str, Any]] = None
    comment: Omittable[StrictStr] = None
    performed_by: StrictStr


class ObjectAction(WireModel):
    """
    Audit record of one action performed on an object.

    Immutable once created; only the webhook delivery status moves on, via
    ``with_webhook_status``.
    """

    model_config = ConfigDict(frozen=True)

    id: StrictStr
    object_id: StrictStr
    action_type: ActionTypeValue
    action_data: Omittable[Dict[str, Any]] = None
    comment: Omittable[StrictStr] = None
    performed_by: StrictStr
    performed_at: DateTimeStr
    webhook_status: WebhookDeliveryStatusValue = WebhookDeliveryStatus.PENDING

    def with_webhook_status(self, status: WebhookDeliveryStatus) -> "ObjectAction":
        return self.model_copy(update={"webhook_status": WebhookDeliveryStatus(status)})


class CommentCreate(WireModel):
    """Schema for creating a comment."""
    object_id: StrictStr
    user_id: StrictStr
    content: StrictStr
    parent_id: Optional[StrictStr] = Field(..., description="Comment replied to, null for a top-level comment")


class Comment(WireModel):
    """A remark on an object, optionally replying to an earlier comment."""
    id: StrictStr
    object_id: StrictStr
    user_id: StrictStr
    content: StrictStr
    parent_id: Optional[StrictStr] = Field(...)
    created_at: DateTimeStr
    updated_at: DateTimeStr


class CommentUpdate(UpdateModel):
    """Schema for editing a comment's text."""
    content: Omittable[StrictStr] = None
