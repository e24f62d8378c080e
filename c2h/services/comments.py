"""Comment threading."""

from typing import Dict, List, Sequence

from pydantic import BaseModel

from c2h.errors import IssueKind, SchemaValidationError, ValidationIssue
from c2h.schemas.common import parse_datetime
from c2h.schemas.review import Comment


class CommentThread(BaseModel):
    """A comment and its replies, oldest first."""
    comment: Comment
    replies: List["CommentThread"] = []

    def size(self) -> int:
        return 1 + sum(reply.size() for reply in self.replies)


def thread_issues(comments: Sequence[Comment]) -> List[ValidationIssue]:
    """
    Check that every reply points at an earlier comment on the same object.

    A parent must exist in ``comments``, share the reply's objectId and have
    been created strictly before it, so threads always form a forest.
    """
    by_id: Dict[str, Comment] = {comment.id: comment for comment in comments}
    issues: List[ValidationIssue] = []

    for index, comment in enumerate(comments):
        if comment.parent_id is None:
            continue
        path: list = [index, "parentId"]
        parent = by_id.get(comment.parent_id)
        if parent is None:
            issues.append(ValidationIssue(
                path=path, kind=IssueKind.SHAPE, code="parent_not_found",
                message=f"Comment {comment.parent_id} does not exist",
            ))
        elif parent.object_id != comment.object_id:
            issues.append(ValidationIssue(
                path=path, kind=IssueKind.SHAPE, code="parent_other_object",
                message=f"Comment {parent.id} belongs to object {parent.object_id}",
            ))
        elif parse_datetime(parent.created_at) >= parse_datetime(comment.created_at):
            issues.append(ValidationIssue(
                path=path, kind=IssueKind.SHAPE, code="parent_not_earlier",
                message=f"Comment {parent.id} was not created before its reply",
            ))
    return issues


def build_threads(comments: Sequence[Comment]) -> List[CommentThread]:
    """Group comments into threads, ordered by creation time."""
    issues = thread_issues(comments)
    if issues:
        raise SchemaValidationError(issues, "Comment thread")

    ordered = sorted(comments, key=lambda comment: parse_datetime(comment.created_at))
    nodes = {comment.id: CommentThread(comment=comment) for comment in ordered}
    roots: List[CommentThread] = []
    for comment in ordered:
        node = nodes[comment.id]
        if comment.parent_id is None:
            roots.append(node)
        else:
            nodes[comment.parent_id].replies.append(node)
    return roots
