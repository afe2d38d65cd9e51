"""Shared test fixtures for the coverize test suite.

WHY: Several test modules need the same sample titles and the same rendered
cover. Centralizing them here avoids duplication and keeps expected layouts
in one place.

HOW: Pytest fixtures provide a resolved engine config, a list of ordinary
titles for property-style checks, and a rendered cover for renderer tests.

RULES:
- SAMPLE_TITLES contain no hyphenated words longer than 12 characters, so the
  word-preservation property holds for them unchanged.
- The rendered cover uses explicit options so tests do not depend on
  COVERIZE_* environment variables.
"""

from typing import List

import pytest

from cover_typeset import resolve_config
from coverize.core.cover import Cover, RenderedCover

SAMPLE_TITLES: List[str] = [
    "The Great Gatsby",
    "Moby Dick",
    "It",
    "Pride and Prejudice",
    "The Lord of the Rings",
    "Harry Potter and the Chamber of Secrets",
    "A Tale of Two Cities",
    "To Kill a Mockingbird",
    "One Hundred Years of Solitude",
    "The Hitchhiker's Guide to the Galaxy",
    "Extraordinarily Long and Unwieldy Title",
    "Incomprehensibilities",
    "Tom & Jerry",
    "What Dreams Are Made Of",
    "Of Mice and Men",
    "The Curious Incident of the Dog in the Night-Time",
    "And Then There Were None",
]


@pytest.fixture
def config():
    """A fresh copy of the default engine config."""
    return resolve_config()


@pytest.fixture
def sample_titles():
    return list(SAMPLE_TITLES)


@pytest.fixture
def gatsby_cover() -> RenderedCover:
    """The Great Gatsby with preset 3, realism on, default options."""
    return (
        Cover()
        .title("The Great Gatsby")
        .author("F. Scott Fitzgerald")
        .color(3)
        .effects(realism=True)
        .options(ratio=0.67, font="sans", emphasis="both", size="regular")
        .render(width=200)
    )
