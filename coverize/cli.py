"""Command-line interface for the cover generator.

WHY: Users need a simple way to produce a cover from the terminal or a build
script. The CLI wires together the Cover builder, the typesetting engine and
the pluggable renderers behind a single command.

HOW: Uses argparse to accept the title and optional author, colour, effect and
option flags, an output format and an output path. Builds a Cover, renders it
at the requested width and writes the content to a file or stdout. Status
messages go to stderr so the output can be piped. --serve starts the HTTP API
instead.

RULES:
- Positional arguments: title, optional author
- --color accepts a preset index, a preset name, or a CSS colour; given twice,
  both values are CSS colours of a gradient
- --format: renderer key (default: html)
- Exit codes: 0 = success, 1 = invalid option or I/O error
- Status output goes to stderr (not stdout)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Union

from coverize.config import DEFAULT_WIDTH, LOG_LEVEL
from coverize.core.cover import Cover
from coverize.presets import (
    COLOR_PRESET_NAMES,
    COLOR_PRESETS,
    EMPHASIS_MODES,
    FONTS,
    SIZE_MULTIPLIERS,
    find_preset,
)
from coverize.renderers import RENDERERS, get_renderer


def _status(msg: str) -> None:
    """Print a status message to stderr."""
    print(msg, file=sys.stderr, flush=True)


def parse_color(value: str) -> Union[int, str]:
    """Interpret a --color value as a preset index, a preset name, or a colour.

    RULES:
    - All digits → preset index
    - Matches a preset name (case-insensitive) → that preset's index
    - Anything else is passed through as a CSS colour
    """
    if value.isdigit():
        return int(value)
    try:
        return find_preset(value)
    except ValueError:
        return value


def _apply_colors(cover: Cover, values: Optional[List[str]]) -> None:
    if not values:
        return
    if len(values) > 2:
        raise ValueError("At most two --color values are allowed, got {}".format(len(values)))

    if len(values) == 1:
        cover.color(parse_color(values[0]))
    else:
        cover.color(values[0], values[1])


def build_cover(args: argparse.Namespace) -> Cover:
    """Build a Cover from parsed CLI arguments.

    Raises:
        ValueError: If an option value is rejected by the builder.
    """
    cover = Cover().title(args.title).author(args.author or "")
    if args.image:
        cover.image(args.image)
    _apply_colors(cover, args.color)
    cover.effects(realism=args.realism, texture=args.texture, depth=args.depth)

    options = {}
    for key in ("ratio", "font", "emphasis", "size"):
        value = getattr(args, key)
        if value is not None:
            options[key] = value
    if options:
        cover.options(**options)
    return cover


def _list_presets() -> None:
    for index, (name, colors) in enumerate(zip(COLOR_PRESET_NAMES, COLOR_PRESETS)):
        print("{:>2}  {:<14} {} {}".format(index, name, colors[0], colors[1]))


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable: tests can inspect the parser without rendering anything.
    """
    parser = argparse.ArgumentParser(
        prog="coverize",
        description="Generate a book cover (HTML, JSON or text) from a title and an author.",
    )

    parser.add_argument("title", nargs="?", default="", help="Book title.")
    parser.add_argument("author", nargs="?", default="", help="Author name(s).")

    parser.add_argument(
        "--format",
        default="html",
        help="Output format. Available: {} (default: %(default)s).".format(
            ", ".join(sorted(RENDERERS.keys()))),
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Write the rendered cover to this file (default: stdout).",
    )
    parser.add_argument(
        "--width",
        type=float,
        default=DEFAULT_WIDTH,
        help="Cover width in pixels, used for the base font size (default: %(default)s).",
    )
    parser.add_argument(
        "--color",
        action="append",
        default=None,
        help="Preset index, preset name, or CSS colour. Give two CSS colours for a gradient.",
    )
    parser.add_argument("--image", default=None, help="Background image URL or path.")
    parser.add_argument("--emphasis", choices=EMPHASIS_MODES, default=None,
                        help="Emphasis style for primary lines.")
    parser.add_argument("--font", choices=FONTS, default=None, help="Font family.")
    parser.add_argument("--size", choices=sorted(SIZE_MULTIPLIERS), default=None,
                        help="Overall cover text size.")
    parser.add_argument("--ratio", type=float, default=None,
                        help="Width / height aspect ratio.")

    for effect, text in (
        ("realism", "spine, sheen and shading layers"),
        ("texture", "a paper texture layer"),
        ("depth", "a depth shadow layer"),
    ):
        parser.add_argument(
            "--{}".format(effect),
            action=argparse.BooleanOptionalAction,
            default=False,
            help="Add {} (default: %(default)s).".format(text),
        )

    parser.add_argument("--list-presets", action="store_true",
                        help="List colour presets and exit.")
    parser.add_argument("--serve", action="store_true",
                        help="Run the HTTP API instead of rendering a cover.")

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s: %(message)s")

    if args.list_presets:
        _list_presets()
        return

    if args.serve:
        from coverize.server.app import run_api
        run_api()
        return

    if not args.title and not args.author:
        parser.error("a title or an author is required")

    try:
        renderer = get_renderer(args.format)
        cover = build_cover(args)
        output = renderer.render(cover.render(width=args.width))
    except ValueError as e:
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)

    if args.output:
        path = Path(args.output)
        try:
            path.write_text(output.content, encoding="utf-8")
        except OSError as e:
            print("Error: Could not write {}: {}".format(path, e), file=sys.stderr)
            sys.exit(1)
        _status("Wrote {} cover to {}".format(renderer.name, path))
    else:
        sys.stdout.write(output.content)


if __name__ == "__main__":
    main()
