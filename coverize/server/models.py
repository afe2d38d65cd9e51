"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation. Pydantic
models enforce field types at runtime and generate JSON Schema that
appears in the /docs UI.

HOW: Each endpoint pair (request + response) has its own model. Enums
represent closed sets like option and renderer names. All models include
Field descriptions for rich OpenAPI docs.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- Enum values match internal constants exactly (renderer keys, presets)
- Response models never expose internal implementation details
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class RendererKey(str, Enum):
    """Available renderer identifiers.

    RULES:
    - Values match keys in coverize.renderers.RENDERERS exactly
    """

    html = "html"
    json = "json"
    text = "text"


class EmphasisMode(str, Enum):
    bold = "bold"
    case = "case"
    both = "both"
    none = "none"


class FontFamily(str, Enum):
    sans = "sans"
    serif = "serif"


class CoverSize(str, Enum):
    small = "small"
    regular = "regular"
    large = "large"


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class TypesetRequest(BaseModel):
    """Title and author to typeset.

    RULES:
    - Both fields may be empty; both empty yields no lines
    """

    title: str = Field(default="", description="Raw book title.")
    author: str = Field(default="", description="Raw author name(s).")

    model_config = {"json_schema_extra": {
        "examples": [
            {"title": "The Great Gatsby", "author": "F. Scott Fitzgerald"}
        ]
    }}


class CoverEffects(BaseModel):
    realism: bool = Field(default=False, description="Add spine, sheen and shading layers.")
    texture: bool = Field(default=False, description="Add a paper texture layer.")
    depth: bool = Field(default=False, description="Add a depth shadow layer.")


class CoverOptions(BaseModel):
    """Cover options; unset fields use the server defaults."""

    ratio: Optional[float] = Field(
        default=None, gt=0, allow_inf_nan=False, description="Width / height aspect ratio.",
    )
    font: Optional[FontFamily] = Field(default=None, description="Title and author font family.")
    emphasis: Optional[EmphasisMode] = Field(
        default=None,
        description="How emphasized lines are styled: bold, uppercase (case), both, or none.",
    )
    size: Optional[CoverSize] = Field(default=None, description="Overall cover text size.")


class CoverRequest(TypesetRequest):
    """A full cover description to render.

    RULES:
    - preset (index) takes precedence over colors when both are given
    - colors holds at most two CSS colours (gradient) or one (flat)
    - renderer defaults to "html"
    """

    preset: Optional[int] = Field(
        default=None,
        description="Colour preset index (see GET /presets/colors).",
    )
    colors: List[str] = Field(
        default_factory=list,
        max_length=2,
        description="One or two CSS colours for the background.",
    )
    image: Optional[str] = Field(default=None, description="Background image URL.")
    effects: CoverEffects = Field(default_factory=CoverEffects, description="Visual effects.")
    options: CoverOptions = Field(default_factory=CoverOptions, description="Cover options.")
    width: float = Field(
        default=200, gt=0, allow_inf_nan=False, description="Cover width in pixels.",
    )
    renderer: RendererKey = Field(default=RendererKey.html, description="Output format.")


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class LineModel(BaseModel):
    """One typeset display line."""

    text: str = Field(description="Line text, title-cased for title lines.")
    emphasis: bool = Field(description="True for lines from a primary word group.")
    role: Optional[str] = Field(default=None, description="'author' for the author line.")
    size: float = Field(description="Font scale factor relative to the base size (0.2-1.0).")


class TypesetResponse(BaseModel):
    """Typeset lines, title first and author last."""

    lines: List[LineModel] = Field(description="Ordered display lines.")

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "lines": [
                    {"text": "The", "emphasis": False, "role": None, "size": 1.0},
                    {"text": "Great", "emphasis": True, "role": None, "size": 1.0},
                    {"text": "Gatsby", "emphasis": True, "role": None, "size": 1.0},
                    {"text": "F. Scott Fitzgerald", "emphasis": False, "role": "author", "size": 1.0},
                ]
            }
        ]
    }}


class ColorPreset(BaseModel):
    index: int = Field(description="Preset index used in cover requests.")
    name: str = Field(description="Human-readable preset name.")
    colors: List[str] = Field(description="Light and dark colour of the gradient.")


class RendererInfo(BaseModel):
    """Description of an available renderer."""

    key: str = Field(description="Renderer identifier used in API requests.")
    name: str = Field(description="Human-readable renderer name.")
    suffix: str = Field(description="File suffix produced (e.g. '-cover.html').")


class ErrorResponse(BaseModel):
    """Standard error response body.

    RULES:
    - detail is always a human-readable error message
    """

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
