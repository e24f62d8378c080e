"""Webhook payload construction and delivery bookkeeping.

Sending, signing and retrying deliveries belongs to the dispatcher.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional

from c2h.errors import WorkflowError
from c2h.schemas.common import format_datetime
from c2h.schemas.review import ObjectAction, WebhookDeliveryStatus
from c2h.schemas.webhook import Webhook, WebhookEvent, WebhookPayload
from c2h.services.validation import validate

logger = logging.getLogger(__name__)


def build_payload(
    event: WebhookEvent,
    workspace_id: str,
    data: Dict[str, Any],
    timestamp: Optional[str] = None,
) -> WebhookPayload:
    """Wrap event data in the delivery envelope, stamped now unless given."""
    return validate(WebhookPayload, {
        "event": WebhookEvent(event).value,
        "timestamp": timestamp or format_datetime(datetime.now(timezone.utc)),
        "workspaceId": workspace_id,
        "data": data,
    })


def subscribers(webhooks: Iterable[Webhook], event: WebhookEvent, workspace_id: str) -> List[Webhook]:
    """Active webhooks of ``workspace_id`` subscribed to ``event``."""
    return [
        webhook
        for webhook in webhooks
        if webhook.workspace_id == workspace_id and webhook.subscribes_to(event)
    ]


def record_delivery(action: ObjectAction, delivered: bool) -> ObjectAction:
    """Return ``action`` with its delivery outcome written back."""
    if action.webhook_status != WebhookDeliveryStatus.PENDING:
        raise WorkflowError(
            "delivery_already_recorded",
            f"Delivery for action {action.id} is already {action.webhook_status.value}",
        )
    status = WebhookDeliveryStatus.DELIVERED if delivered else WebhookDeliveryStatus.FAILED
    logger.debug("Webhook delivery for action %s: %s", action.id, status.value)
    return action.with_webhook_status(status)
