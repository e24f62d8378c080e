import pytest
from pydantic import ValidationError

from c2h.errors import IssueKind
from c2h.schemas import (
    C2HObject,
    Comment,
    CommentCreate,
    CommentUpdate,
    ObjectAction,
    ObjectActionCreate,
    ObjectCreate,
    ObjectStatus,
    ObjectUpdate,
    WebhookDeliveryStatus,
)
from c2h.services.validation import check, validate

TS = "2024-01-01T00:00:00Z"


def test_object_defaults(object_payload):
    obj = validate(C2HObject, object_payload)

    assert obj.version == 1
    assert obj.metadata == {}
    assert obj.status == ObjectStatus.PENDING


@pytest.mark.parametrize("status", [member.value for member in ObjectStatus])
def test_object_accepts_every_status(object_payload, status):
    object_payload["status"] = status
    assert validate(C2HObject, object_payload).status.value == status


def test_object_data_accepts_arbitrary_content(object_payload):
    object_payload["data"] = {"f1": {"nested": [1, 2.5, None, True]}, "other": "x"}
    object_payload["metadata"] = {"source": "import", "tags": ["a"]}

    wire = validate(C2HObject, object_payload).to_wire()

    assert wire["data"] == object_payload["data"]
    assert wire["metadata"] == object_payload["metadata"]


def test_object_data_must_be_a_mapping(object_payload):
    object_payload["data"] = ["f1"]
    result = check(C2HObject, object_payload)
    assert result.issues[0].path == ["data"]
    assert result.issues[0].kind == IssueKind.SHAPE


def test_object_folder_and_creator_are_nullable_not_optional(object_payload):
    object_payload["createdBy"] = None
    assert check(C2HObject, object_payload).ok

    del object_payload["folderId"]
    del object_payload["createdBy"]
    result = check(C2HObject, object_payload)
    assert sorted(issue.path[0] for issue in result.issues) == ["createdBy", "folderId"]


def test_object_create_rejects_status_and_server_fields(object_payload):
    result = check(ObjectCreate, object_payload)

    assert sorted(issue.path[0] for issue in result.issues) == [
        "createdAt", "id", "status", "updatedAt",
    ]

    for key in ("id", "status", "createdAt", "updatedAt"):
        object_payload.pop(key)
    created = validate(ObjectCreate, object_payload)
    assert created.metadata == {}


def test_object_update_is_partial():
    update = validate(ObjectUpdate, {"data": {"f1": "Edited"}})
    assert update.changes() == {"data": {"f1": "Edited"}}

    assert validate(ObjectUpdate, {}).changes() == {}
    assert check(ObjectUpdate, {"status": "approved"}).issues[0].code == "extra_forbidden"


def _action_payload(**overrides):
    payload = {
        "id": "act1",
        "objectId": "o1",
        "actionType": "approve",
        "performedBy": "u2",
        "performedAt": TS,
    }
    payload.update(overrides)
    return payload


def test_object_action_defaults_to_pending_delivery():
    action = validate(ObjectAction, _action_payload())

    assert action.webhook_status == WebhookDeliveryStatus.PENDING
    assert action.to_wire() == dict(_action_payload(), webhookStatus="pending")


def test_object_action_optional_payload():
    action = validate(ObjectAction, _action_payload(
        actionData={"diff": {"f1": ["old", "new"]}}, comment="Looks good",
    ))
    assert action.action_data == {"diff": {"f1": ["old", "new"]}}
    assert action.comment == "Looks good"


def test_object_action_is_immutable():
    action = validate(ObjectAction, _action_payload())

    with pytest.raises(ValidationError):
        action.comment = "changed"

    delivered = action.with_webhook_status(WebhookDeliveryStatus.DELIVERED)
    assert delivered.webhook_status == WebhookDeliveryStatus.DELIVERED
    assert action.webhook_status == WebhookDeliveryStatus.PENDING
    assert delivered.id == action.id


def test_object_action_rejects_unknown_types():
    result = check(ObjectAction, _action_payload(actionType="escalate", webhookStatus="lost"))

    assert {tuple(issue.path) for issue in result.issues} == {("actionType",), ("webhookStatus",)}
    assert {issue.kind for issue in result.issues} == {IssueKind.ENUM}


def test_object_action_create_shape():
    created = validate(ObjectActionCreate, {"objectId": "o1", "actionType": "comment", "performedBy": "u1"})
    assert created.to_wire() == {"objectId": "o1", "actionType": "comment", "performedBy": "u1"}

    result = check(ObjectActionCreate, {"objectId": "o1", "actionType": "comment", "performedBy": "u1",
                                        "performedAt": TS})
    assert result.issues[0].code == "extra_forbidden"


def test_comment_parent_is_required_but_nullable():
    payload = {
        "id": "c1", "objectId": "o1", "userId": "u1", "content": "Hi",
        "parentId": None, "createdAt": TS, "updatedAt": TS,
    }
    assert validate(Comment, payload).parent_id is None

    del payload["parentId"]
    assert check(Comment, payload).issues[0].path == ["parentId"]


def test_comment_create_and_update():
    created = validate(CommentCreate, {"objectId": "o1", "userId": "u1", "content": "Hi", "parentId": "c0"})
    assert created.parent_id == "c0"

    assert validate(CommentUpdate, {"content": "Edited"}).changes() == {"content": "Edited"}
    assert check(CommentUpdate, {"content": None}).issues[0].code == "none_forbidden"
