"""Outbound webhook subscription schemas."""

from enum import Enum
from typing import Any, Dict, List

from pydantic import StrictStr

from c2h.schemas.common import DateTimeStr, Omittable, UpdateModel, UrlStr, WireModel, closed_enum


class WebhookEvent(str, Enum):
    OBJECT_CREATED = "object.created"
    OBJECT_APPROVED = "object.approved"
    OBJECT_REJECTED = "object.rejected"
    OBJECT_CHANGES_REQUESTED = "object.changes_requested"
    OBJECT_EDITED = "object.edited"
    OBJECT_COMMENTED = "object.commented"
    TEMPLATE_APPROVED = "template.approved"


class WebhookStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


WebhookEventValue = closed_enum(WebhookEvent)
WebhookStatusValue = closed_enum(WebhookStatus)


class WebhookCreate(WireModel):
    """Schema for registering a webhook."""
    workspace_id: StrictStr
    name: StrictStr
    url: UrlStr
    events: List[WebhookEventValue]
    # Signing key handed to the dispatcher
    secret: StrictStr
    status: WebhookStatusValue = WebhookStatus.ACTIVE


class Webhook(WebhookCreate):
    """A stored workspace-level subscription."""
    id: StrictStr
    created_at: DateTimeStr
    updated_at: DateTimeStr

    def subscribes_to(self, event: WebhookEvent) -> bool:
        return self.status == WebhookStatus.ACTIVE and WebhookEvent(event) in self.events


class WebhookUpdate(UpdateModel):
    name: Omittable[StrictStr] = None
    url: Omittable[UrlStr] = None
    events: Omittable[List[WebhookEventValue]] = None
    secret: Omittable[StrictStr] = None
    status: Omittable[WebhookStatusValue] = None


class WebhookPayload(WireModel):
    """Envelope delivered to subscribers; ``data`` depends on the event."""
    event: WebhookEventValue
    timestamp: DateTimeStr
    workspace_id: StrictStr
    data: Dict[str, Any]
