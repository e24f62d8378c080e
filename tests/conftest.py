from typing import Any, Dict

import pytest

from c2h.config import get_settings

TS = "2024-01-01T00:00:00Z"


@pytest.fixture(autouse=True)
def fresh_settings():
    """Each test sees settings built from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def template_payload() -> Dict[str, Any]:
    return {
        "id": "t1",
        "workspaceId": "w1",
        "folderId": None,
        "name": "Review",
        "fieldSchema": [{"id": "f1", "type": "text", "label": "Title"}],
        "actionSchema": [{"id": "a1", "type": "approve", "label": "Approve"}],
        "status": "draft",
        "createdBy": "u1",
        "createdAt": TS,
        "updatedAt": TS,
    }


@pytest.fixture
def create_template_payload(template_payload) -> Dict[str, Any]:
    payload = dict(template_payload)
    for key in ("id", "createdAt", "updatedAt"):
        payload.pop(key)
    return payload


@pytest.fixture
def object_payload() -> Dict[str, Any]:
    return {
        "id": "o1",
        "templateId": "t1",
        "workspaceId": "w1",
        "folderId": None,
        "status": "pending",
        "data": {"f1": "Launch post"},
        "createdBy": "u1",
        "createdAt": TS,
        "updatedAt": TS,
    }


@pytest.fixture
def webhook_payload() -> Dict[str, Any]:
    return {
        "id": "h1",
        "workspaceId": "w1",
        "name": "Slack relay",
        "url": "https://example.com/hook",
        "events": ["object.approved"],
        "secret": "s3cret",
        "createdAt": TS,
        "updatedAt": TS,
    }
