"""FastAPI application with typesetting and cover rendering routes.

WHY: Web front ends, static site generators and other services need covers
without embedding Python. An HTTP API exposes the typesetting engine and the
cover renderers with automatic OpenAPI documentation and request validation.

HOW: A single FastAPI app exposes endpoints grouped by tags. POST /typeset
returns the raw line layout; POST /covers builds a Cover from the request,
renders it with the selected renderer and returns the content with the
renderer's media type. Discovery endpoints list colour presets and renderers.

RULES:
- All endpoints have OpenAPI descriptions on every response
- Error responses use a consistent ErrorResponse schema
- ValueError from the cover builder maps to 400
- Request validation errors are FastAPI's default 422
- Requests are independent; no state is kept between calls
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response

from cover_typeset import typeset
from coverize import __version__
from coverize.config import LOG_LEVEL, SERVER_HOST, SERVER_PORT
from coverize.core.cover import Cover
from coverize.presets import COLOR_PRESET_NAMES, COLOR_PRESETS
from coverize.renderers import RENDERERS, get_renderer
from coverize.server.models import (
    ColorPreset,
    CoverRequest,
    ErrorResponse,
    HealthResponse,
    LineModel,
    RendererInfo,
    TypesetRequest,
    TypesetResponse,
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Coverize API",
    description=(
        "REST API for generating book covers from a title and an author. "
        "Typeset a title into balanced display lines, or render a complete "
        "cover as HTML, JSON or plain text."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def build_cover(request: CoverRequest) -> Cover:
    """Build a Cover from a validated request.

    RULES:
    - preset wins over colors when both are set
    - Unset options keep the configured defaults

    Raises:
        ValueError: If an option or effect is rejected by the builder.
    """
    cover = Cover().title(request.title).author(request.author).image(request.image)

    if request.preset is not None:
        cover.color(request.preset)
    elif request.colors:
        cover.color(*request.colors)

    cover.effects(**request.effects.model_dump())
    options = request.options.model_dump(exclude_none=True, mode="json")
    if options:
        cover.options(**options)
    return cover


# ---------------------------------------------------------------------------
# Endpoints: Typesetting
# ---------------------------------------------------------------------------


@app.post(
    "/typeset",
    response_model=TypesetResponse,
    tags=["typesetting"],
    summary="Typeset a title and author",
    description=(
        "Break a book title into emphasized and secondary display lines with "
        "relative size factors, followed by the author line."
    ),
)
async def typeset_title(request: TypesetRequest) -> TypesetResponse:
    lines = typeset(request.title, request.author)
    return TypesetResponse(lines=[LineModel(**line.to_dict()) for line in lines])


@app.post(
    "/covers",
    tags=["covers"],
    summary="Render a cover",
    description=(
        "Build a cover from title, author, colours, effects and options, and "
        "return it rendered with the selected renderer (html, json or text)."
    ),
    responses={
        200: {"description": "Rendered cover content in the renderer's media type."},
        400: {"model": ErrorResponse, "description": "Invalid cover option or renderer"},
    },
)
async def render_cover(request: CoverRequest) -> Response:
    try:
        cover = build_cover(request)
        renderer = get_renderer(request.renderer.value)
        output = renderer.render(cover.render(width=request.width))
    except ValueError as exc:
        logger.info("Rejected cover request: %s", exc)
        raise HTTPException(status_code=400, detail=str(exc))

    logger.info("Rendered %s cover for %r", request.renderer.value, request.title)
    return Response(content=output.content, media_type=output.media_type)


# ---------------------------------------------------------------------------
# Endpoints: Discovery
# ---------------------------------------------------------------------------


@app.get(
    "/presets/colors",
    response_model=List[ColorPreset],
    tags=["presets"],
    summary="List colour presets",
    description="Returns every colour preset with its index, name and colours.",
)
async def list_color_presets() -> List[ColorPreset]:
    return [
        ColorPreset(index=index, name=name, colors=list(colors))
        for index, (name, colors) in enumerate(zip(COLOR_PRESET_NAMES, COLOR_PRESETS))
    ]


@app.get(
    "/renderers",
    response_model=List[RendererInfo],
    tags=["presets"],
    summary="List available renderers",
    description="Returns all renderers with their identifiers, names and file suffixes.",
)
async def list_renderers() -> List[RendererInfo]:
    return [
        RendererInfo(key=key, name=renderer_cls().name, suffix=renderer_cls.suffix)
        for key, renderer_cls in sorted(RENDERERS.items())
    ]


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness and readiness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api() -> None:
    """Entry point for the coverize-api console script."""
    import uvicorn

    logging.basicConfig(level=LOG_LEVEL)
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT, log_level=LOG_LEVEL.lower())
