import pytest

from c2h.config import get_settings
from c2h.errors import IssueKind, SchemaValidationError
from c2h.schemas import Webhook, WebhookCreate, WebhookEvent, WebhookPayload, WebhookStatus, WebhookUpdate
from c2h.services.validation import check, validate


def test_webhook_with_valid_url_defaults_to_active(webhook_payload):
    webhook = validate(Webhook, webhook_payload)

    assert webhook.status == WebhookStatus.ACTIVE
    assert webhook.url == "https://example.com/hook"
    assert webhook.to_wire()["url"] == "https://example.com/hook"


def test_webhook_with_invalid_url_is_a_format_error(webhook_payload):
    webhook_payload["url"] = "not-a-url"

    with pytest.raises(SchemaValidationError) as info:
        validate(Webhook, webhook_payload)

    [issue] = info.value.issues
    assert issue.path == ["url"]
    assert issue.kind == IssueKind.FORMAT
    assert issue.code == "url_format"


def test_webhook_url_scheme_must_be_allowed(webhook_payload, monkeypatch):
    webhook_payload["url"] = "ftp://example.com/drop"
    assert check(Webhook, webhook_payload).issues[0].code == "url_format"

    monkeypatch.setenv("C2H_WEBHOOK_URL_SCHEMES", "https, ftp")
    get_settings.cache_clear()
    assert check(Webhook, webhook_payload).ok


def test_webhook_url_is_not_normalized(webhook_payload):
    webhook_payload["url"] = "https://Example.com"
    assert validate(Webhook, webhook_payload).to_wire()["url"] == "https://Example.com"


@pytest.mark.parametrize("event", [member.value for member in WebhookEvent])
def test_every_webhook_event_validates(webhook_payload, event):
    webhook_payload["events"] = [event]
    assert validate(Webhook, webhook_payload).events == [WebhookEvent(event)]


def test_webhook_rejects_unknown_event(webhook_payload):
    webhook_payload["events"] = ["object.approved", "object.deleted"]

    [issue] = check(Webhook, webhook_payload).issues

    assert issue.path == ["events", 1]
    assert issue.kind == IssueKind.ENUM
    assert "template.approved" in issue.allowed


def test_subscribes_to_respects_status(webhook_payload):
    webhook = validate(Webhook, webhook_payload)
    assert webhook.subscribes_to(WebhookEvent.OBJECT_APPROVED)
    assert not webhook.subscribes_to(WebhookEvent.OBJECT_REJECTED)

    webhook_payload["status"] = "inactive"
    assert not validate(Webhook, webhook_payload).subscribes_to(WebhookEvent.OBJECT_APPROVED)


def test_webhook_create_and_update(webhook_payload):
    for key in ("id", "createdAt", "updatedAt"):
        webhook_payload.pop(key)
    assert validate(WebhookCreate, webhook_payload).status == WebhookStatus.ACTIVE

    update = validate(WebhookUpdate, {"status": "inactive"})
    assert update.changes() == {"status": "inactive"}
    assert check(WebhookUpdate, {"url": "nope"}).issues[0].kind == IssueKind.FORMAT


def test_webhook_payload_shape():
    payload = validate(WebhookPayload, {
        "event": "object.created",
        "timestamp": "2024-01-01T00:00:00.000Z",
        "workspaceId": "w1",
        "data": {"objectId": "o1"},
    })
    assert payload.to_wire()["timestamp"] == "2024-01-01T00:00:00.000Z"

    result = check(WebhookPayload, {"event": "object.created", "timestamp": "now", "workspaceId": "w1"})
    assert {issue.code for issue in result.issues} == {"datetime_format", "missing"}
