"""Approval lifecycle rules for objects."""

import logging
from typing import Any, Dict, List, Optional

from pydantic import BaseModel

from c2h.errors import WorkflowError
from c2h.schemas.action import ActionType, TemplateAction
from c2h.schemas.instance import C2HObject, ObjectStatus
from c2h.schemas.review import ObjectActionCreate
from c2h.schemas.template import Template
from c2h.schemas.webhook import WebhookEvent

logger = logging.getLogger(__name__)

_OPEN = [ObjectStatus.PENDING, ObjectStatus.IN_PROGRESS]
_ANY = list(ObjectStatus)


class ActionOutcome(BaseModel):
    """What performing an action leads to. Persisting it is up to the caller."""
    status: ObjectStatus
    action: ObjectActionCreate
    event: Optional[WebhookEvent] = None
    fire_webhook: bool = False


class ApprovalWorkflow:
    """Rules for performing template actions on objects."""

    # Statuses each action may be performed from
    ALLOWED_FROM: Dict[ActionType, List[ObjectStatus]] = {
        ActionType.APPROVE: _OPEN,
        ActionType.REJECT: _OPEN,
        ActionType.REQUEST_CHANGES: _OPEN,
        ActionType.EDIT: _OPEN + [ObjectStatus.CHANGES_REQUESTED],
        ActionType.COMMENT: _ANY,
        ActionType.VIEW: _ANY,
    }

    # Resulting status; actions not listed leave the status as is
    OUTCOMES: Dict[ActionType, ObjectStatus] = {
        ActionType.APPROVE: ObjectStatus.APPROVED,
        ActionType.REJECT: ObjectStatus.REJECTED,
        ActionType.REQUEST_CHANGES: ObjectStatus.CHANGES_REQUESTED,
        ActionType.EDIT: ObjectStatus.IN_PROGRESS,
    }

    EVENTS: Dict[ActionType, WebhookEvent] = {
        ActionType.APPROVE: WebhookEvent.OBJECT_APPROVED,
        ActionType.REJECT: WebhookEvent.OBJECT_REJECTED,
        ActionType.REQUEST_CHANGES: WebhookEvent.OBJECT_CHANGES_REQUESTED,
        ActionType.EDIT: WebhookEvent.OBJECT_EDITED,
        ActionType.COMMENT: WebhookEvent.OBJECT_COMMENTED,
    }

    @staticmethod
    def allowed_actions(status: ObjectStatus) -> List[ActionType]:
        """Action types that may be performed on an object in ``status``."""
        return [
            action_type
            for action_type, statuses in ApprovalWorkflow.ALLOWED_FROM.items()
            if status in statuses
        ]

    @staticmethod
    def next_status(status: ObjectStatus, action_type: ActionType) -> ObjectStatus:
        """Status an object moves to, or WorkflowError if the move is illegal."""
        if status not in ApprovalWorkflow.ALLOWED_FROM.get(action_type, []):
            raise WorkflowError(
                "action_not_allowed",
                f"Cannot {action_type.value} an object with status: {status.value}",
            )
        return ApprovalWorkflow.OUTCOMES.get(action_type, status)

    @staticmethod
    def event_for(action_type: ActionType) -> Optional[WebhookEvent]:
        return ApprovalWorkflow.EVENTS.get(action_type)

    @staticmethod
    def find_action(template: Template, action_type: ActionType) -> TemplateAction:
        """The template's definition for ``action_type``."""
        for definition in template.action_schema:
            if definition.type == action_type:
                return definition
        raise WorkflowError(
            "action_not_defined",
            f"Template {template.id} does not define a {action_type.value} action",
        )

    @staticmethod
    def perform_action(
        template: Template,
        obj: C2HObject,
        action_type: ActionType,
        performed_by: str,
        comment: Optional[str] = None,
        action_data: Optional[Dict[str, Any]] = None,
    ) -> ActionOutcome:
        """
        Check an action against the template and the object's status.

        Returns the resulting status, the action record to persist and the
        webhook event to emit. Nothing is mutated.
        """
        action_type = ActionType(action_type)

        if obj.template_id != template.id:
            raise WorkflowError(
                "template_mismatch",
                f"Object {obj.id} belongs to template {obj.template_id}, not {template.id}",
            )

        definition = ApprovalWorkflow.find_action(template, action_type)

        if definition.requires_comment and not (comment and comment.strip()):
            raise WorkflowError(
                "comment_required",
                f"Action '{definition.label}' requires a comment",
            )

        if action_data is not None and not definition.allow_edit:
            raise WorkflowError(
                "edit_not_allowed",
                f"Action '{definition.label}' does not allow editing",
            )

        try:
            new_status = ApprovalWorkflow.next_status(obj.status, action_type)
        except WorkflowError:
            logger.info("Rejected %s on object %s in status %s", action_type.value, obj.id, obj.status.value)
            raise

        # Omitted rather than null when not given
        extras = {"action_data": action_data, "comment": comment}
        record = ObjectActionCreate(
            object_id=obj.id,
            action_type=action_type,
            performed_by=performed_by,
            **{key: value for key, value in extras.items() if value is not None},
        )
        event = ApprovalWorkflow.event_for(action_type)
        return ActionOutcome(
            status=new_status,
            action=record,
            event=event,
            fire_webhook=definition.webhook_enabled and event is not None,
        )
