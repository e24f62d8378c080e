"""Pydantic schemas for every entity crossing the API boundary."""

from typing import Dict, Type

from c2h.schemas.common import WireModel, UpdateModel
from c2h.schemas.field import (
    FieldType,
    FieldOption,
    FieldValidation,
    TemplateField,
)
from c2h.schemas.action import (
    ActionType,
    ActionColor,
    TemplateAction,
)
from c2h.schemas.template import (
    TemplateStatus,
    Template,
    TemplateCreate,
    TemplateUpdate,
)
from c2h.schemas.instance import (
    ObjectStatus,
    C2HObject,
    ObjectCreate,
    ObjectUpdate,
)
from c2h.schemas.review import (
    WebhookDeliveryStatus,
    ObjectAction,
    ObjectActionCreate,
    Comment,
    CommentCreate,
    CommentUpdate,
)
from c2h.schemas.webhook import (
    WebhookEvent,
    WebhookStatus,
    Webhook,
    WebhookCreate,
    WebhookUpdate,
    WebhookPayload,
)
from c2h.schemas.api import (
    ApiError,
    PageMeta,
    ApiResponse,
)

# Entity name -> shape ("read", "create", "update") -> model
ENTITY_SCHEMAS: Dict[str, Dict[str, Type[WireModel]]] = {
    "field": {"read": TemplateField},
    "action": {"read": TemplateAction},
    "template": {
        "read": Template,
        "create": TemplateCreate,
        "update": TemplateUpdate,
    },
    "object": {
        "read": C2HObject,
        "create": ObjectCreate,
        "update": ObjectUpdate,
    },
    "object_action": {
        "read": ObjectAction,
        "create": ObjectActionCreate,
    },
    "comment": {
        "read": Comment,
        "create": CommentCreate,
        "update": CommentUpdate,
    },
    "webhook": {
        "read": Webhook,
        "create": WebhookCreate,
        "update": WebhookUpdate,
    },
    "webhook_payload": {"read": WebhookPayload},
}

__all__ = [
    "ENTITY_SCHEMAS",
    "WireModel",
    "UpdateModel",
    # Field
    "FieldType",
    "FieldOption",
    "FieldValidation",
    "TemplateField",
    # Action
    "ActionType",
    "ActionColor",
    "TemplateAction",
    # Template
    "TemplateStatus",
    "Template",
    "TemplateCreate",
    "TemplateUpdate",
    # Object
    "ObjectStatus",
    "C2HObject",
    "ObjectCreate",
    "ObjectUpdate",
    # Review
    "WebhookDeliveryStatus",
    "ObjectAction",
    "ObjectActionCreate",
    "Comment",
    "CommentCreate",
    "CommentUpdate",
    # Webhook
    "WebhookEvent",
    "WebhookStatus",
    "Webhook",
    "WebhookCreate",
    "WebhookUpdate",
    "WebhookPayload",
    # API
    "ApiError",
    "PageMeta",
    "ApiResponse",
]
