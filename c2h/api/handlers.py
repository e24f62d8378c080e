"""FastAPI exception handlers producing ApiResponse envelopes."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from c2h.api.responses import from_validation_error, from_workflow_error
from c2h.errors import SchemaValidationError, WorkflowError
from c2h.services.validation import issues_from

logger = logging.getLogger(__name__)


def _strip_source(issue):
    # FastAPI prefixes locations with the request part ("body", "query", ...)
    if issue.path and issue.path[0] in ("body", "query", "path", "header", "cookie"):
        issue.path = issue.path[1:]
    return issue


def register_exception_handlers(app: FastAPI) -> None:
    """Install handlers mapping validation and workflow errors to envelopes."""

    @app.exception_handler(SchemaValidationError)
    async def schema_validation_handler(request: Request, exc: SchemaValidationError):
        return JSONResponse(
            status_code=422,
            content=from_validation_error(exc).to_wire(),
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        issues = [_strip_source(issue) for issue in issues_from(exc.errors())]
        logger.debug("%s %s rejected with %d issue(s)", request.method, request.url.path, len(issues))
        error = SchemaValidationError(issues)
        return JSONResponse(
            status_code=422,
            content=from_validation_error(error).to_wire(),
        )

    @app.exception_handler(WorkflowError)
    async def workflow_handler(request: Request, exc: WorkflowError):
        logger.info("Workflow rule violated: %s", exc.code)
        return JSONResponse(
            status_code=409,
            content=from_workflow_error(exc).to_wire(),
        )
