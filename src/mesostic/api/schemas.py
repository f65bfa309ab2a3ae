"""
API schemas: submission bodies, composition responses and RFC 7807 errors.

Every 2xx composition response is a :class:`ComposeResponse`; every 4xx/5xx
is a :class:`ProblemDetail`.
"""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# ── RFC 7807 Problem Detail ─────────────────────────────────────────────


class ErrorDetail(BaseModel):
    """Structured error detail for a single failure."""

    code: str = Field(description="Machine-readable error code (e.g., 'EMPTY_SPINE')")
    message: str = Field(description="Human-readable error description")
    field: str | None = Field(default=None, description="Field path if error is field-specific")


class ProblemDetail(BaseModel):
    """RFC 7807 «Problem Details for HTTP APIs».

    Error Codes:
        - ``EMPTY_SOURCE`` (422): Source text has no content
        - ``EMPTY_SPINE`` (422): Spine has no alphabetic characters
        - ``SPINE_EXHAUSTS_SOURCE`` (422): A spine letter cannot be placed
        - ``SOURCE_TOO_LARGE`` (413): Source exceeds the configured limit
        - ``COMPOSE_TIMEOUT`` (504): Composition took too long
        - ``INTERNAL`` (500): Unexpected server error

    Example:
        {
            "type": "about:blank",
            "title": "No remaining source line contains 'z' (spine position 0)",
            "status": 422,
            "detail": "SPINE_EXHAUSTS_SOURCE",
            "instance": "http://testserver/app",
            "errors": [{"code": "SPINE_EXHAUSTS_SOURCE", "message": "...", "field": "spine"}]
        }
    """

    type: str = Field(default="about:blank", description="Error type URI (usually 'about:blank')")
    title: str = Field(description="Short human-readable error summary")
    status: int = Field(description="HTTP status code")
    detail: str = Field(default="", description="Human-readable explanation of the error")
    instance: str = Field(default="", description="URI of the failing request")
    errors: list[ErrorDetail] = Field(default_factory=list)


# ── Submissions ─────────────────────────────────────────────────────────


class SubmitRequest(BaseModel):
    """JSON submission: ``{"Text": "...", "SpineString": "..."}``.

    snake_case field names are accepted as well.
    """

    model_config = ConfigDict(populate_by_name=True)

    text: str = Field(
        validation_alias=AliasChoices("Text", "text"),
        description="Source text the mesostic is drawn from",
    )
    spine_string: str = Field(
        validation_alias=AliasChoices("SpineString", "spine_string", "spine"),
        description="Spine spelled down the page",
    )


# ── Responses ───────────────────────────────────────────────────────────


class RenderedLineSchema(BaseModel):
    """One output line with its marked (upper-cased) spine letters."""

    line_index: int = Field(description="0-based index of the physical source line")
    text: str = Field(description="Source line with spine letters upper-cased")
    columns: list[int] = Field(description="Columns of the spine letters within the line")


class ComposeResponse(BaseModel):
    """Successful composition."""

    source: str
    spine: str
    mesostic: str = Field(description="Rendered, axis-aligned mesostic")
    lines: list[RenderedLineSchema]
