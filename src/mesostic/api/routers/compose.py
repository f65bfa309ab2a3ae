"""
Composition router: turn submitted text and a spine into a mesostic.

POST /app           JSON body ``{"Text": ..., "SpineString": ...}``
POST /app/{spine}   Form submission: field ``text`` or uploaded ``file``

Both endpoints return a :class:`ComposeResponse` on success and a
:class:`ProblemDetail` identifying the failure kind otherwise.
"""

from __future__ import annotations

from fastapi import APIRouter, File, Form, Path, Request, UploadFile
from fastapi.responses import JSONResponse

from mesostic.api.deps import Runner
from mesostic.api.middleware.errors import error_response
from mesostic.api.schemas import ComposeResponse, ProblemDetail, RenderedLineSchema, SubmitRequest
from mesostic.core.errors import MesosticError
from mesostic.core.logging import get_logger
from mesostic.core.result import Err, Ok
from mesostic.observability.metrics import (
    compose_failures_counter,
    post_app_counter,
    post_app_duration_histogram,
)

router = APIRouter(prefix="/app")
logger = get_logger(__name__)

_ERROR_RESPONSES = {
    413: {"model": ProblemDetail, "description": "Source text too large"},
    422: {"model": ProblemDetail, "description": "Source cannot carry the spine"},
    504: {"model": ProblemDetail, "description": "Composition timed out"},
}


async def _submit(request: Request, runner: Runner, text: str, spine: str, *, kind: str) -> ComposeResponse | JSONResponse:
    """Count, time and run one composition, then shape the response."""
    post_app_counter.inc()
    with post_app_duration_histogram.time():
        try:
            result = await runner.run(text, spine)
        except MesosticError as e:
            compose_failures_counter.labels(kind=e.code).inc()
            raise

    match result:
        case Ok(mesostic):
            logger.info(
                "mesostic_composed",
                submission=kind,
                spine=spine,
                letters=len(mesostic),
                source_lines=len(text.splitlines()),
            )
            return ComposeResponse(
                source=text,
                spine=spine,
                mesostic=mesostic.render(),
                lines=[RenderedLineSchema(**line.to_dict()) for line in mesostic.rendered_lines()],
            )
        case Err(error):
            compose_failures_counter.labels(kind=error.code).inc()
            logger.info("mesostic_failed", submission=kind, spine=spine, **error.to_dict())
            return error_response(request, error)


@router.post("", response_model=ComposeResponse, responses=_ERROR_RESPONSES)
async def json_submit(body: SubmitRequest, request: Request, runner: Runner):
    """Compose a mesostic from a JSON submission.

    Example:
        POST /app
        {"Text": "river\\nforest\\nplain", "SpineString": "RIP"}

        Response:
        {
            "source": "river\\nforest\\nplain",
            "spine": "RIP",
            "mesostic": "RIver\\nPlain",
            "lines": [
                {"line_index": 0, "text": "RIver", "columns": [0, 1]},
                {"line_index": 2, "text": "Plain", "columns": [0]}
            ]
        }
    """
    return await _submit(request, runner, body.text, body.spine_string, kind="json")


@router.post("/{spine}", response_model=ComposeResponse, responses=_ERROR_RESPONSES)
async def form_submit(
    request: Request,
    runner: Runner,
    spine: str = Path(..., description="Spine spelled down the page"),
    text: str | None = Form(default=None, description="Source text"),
    file: UploadFile | None = File(default=None, description="UTF-8 source text file"),
):
    """Compose a mesostic from a form field or an uploaded file.

    An uploaded ``file`` takes precedence over the ``text`` field; with
    neither, the source is empty and the composition fails with
    ``EMPTY_SOURCE``.
    """
    if file is not None:
        source = (await file.read()).decode("utf-8", errors="replace")
    else:
        source = text or ""
    return await _submit(request, runner, source, spine, kind="form")
