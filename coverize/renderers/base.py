"""Abstract base renderer and output container.

WHY: Every output format consumes the same RenderedCover but produces
different content. This base class enforces a consistent interface so the
CLI and the HTTP API can work with any renderer generically.

HOW: BaseRenderer is an ABC with two requirements: a ``name`` property and
a ``render()`` method. RendererOutput is a plain dataclass that bundles a file
suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``render()``
- ``suffix`` starts with a hyphen, e.g. ``"-cover.html"``
- The caller is responsible for prepending a filename stem
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from coverize.core.cover import RenderedCover


@dataclass
class RendererOutput:
    """The content produced by a renderer.

    Attributes:
        suffix: File suffix appended to an output stem, e.g. ``"-cover.html"``.
        content: The rendered content.
        media_type: MIME type for the content, e.g. ``"text/html"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseRenderer(ABC):
    """Abstract base for all cover renderers.

    To add a new output format:
    1. Create a new file in renderers/
    2. Subclass BaseRenderer
    3. Implement render() and name, and set the class-level suffix
    4. Register in RENDERERS dict in renderers/__init__.py
    """

    #: File suffix of the output, known without rendering anything.
    suffix: str = ""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'HTML'."""

    @abstractmethod
    def render(self, cover: RenderedCover) -> RendererOutput:
        """Convert a RenderedCover into output content.

        Args:
            cover: The cover snapshot with typeset lines, colours,
                   effects, options and font size.

        Returns:
            A RendererOutput with suffix, content and MIME type.
        """
