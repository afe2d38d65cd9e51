"""CLI wrapper for the title typesetting engine.

WHY: Tuning the lexicons and pattern table is much faster when a title can be
typeset straight from the terminal and the resulting lines inspected, without
rendering a whole cover. It also supports `python -m cover_typeset`.

HOW: Parses argv by hand for the title, optional author, and the --json and
--max-line-length flags, then delegates to the library's typeset() function.

RULES:
- Usage:
    python -m cover_typeset "The Great Gatsby" "F. Scott Fitzgerald"
    python -m cover_typeset "Moby Dick" --json
    python -m cover_typeset "A Very Long Title Indeed" --max-line-length 16
- Exit codes: 0 = success, 1 = error.
- Lines go to stdout; errors go to stderr.
"""

import json
import sys
from typing import List

from . import typeset
from .models import Line

HELP_TEXT = """cover_typeset: book cover title typesetter

Usage:
    python -m cover_typeset TITLE [AUTHOR]
    python -m cover_typeset TITLE [AUTHOR] --json
    python -m cover_typeset TITLE [AUTHOR] --max-line-length N

Output (text mode):
    *  emphasized title line
    -  secondary title line
    @  author line
Each line is followed by its size factor.
"""


def format_line(line: Line) -> str:
    """Format one line for text output, e.g. "*  GATSBY  (1.00)"."""
    if line.role == "author":
        marker = "@"
    elif line.emphasis:
        marker = "*"
    else:
        marker = "-"
    return "{}  {}  ({:.2f})".format(marker, line.text, line.size)


def main(argv: "List[str]" = None) -> None:
    """Run the typesetting CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).
    """
    if argv is None:
        argv = sys.argv[1:]

    args = list(argv)

    if not args or args[0] in ("-h", "--help"):
        print(HELP_TEXT)
        sys.exit(0)

    as_json = False
    config = {}
    positional = []  # type: List[str]
    i = 0
    while i < len(args):
        if args[i] == "--json":
            as_json = True
            i += 1
        elif args[i] == "--max-line-length":
            if i + 1 >= len(args):
                print("Error: --max-line-length requires a value", file=sys.stderr)
                sys.exit(1)
            value = args[i + 1]
            i += 2
            if not value.isdigit() or int(value) < 1:
                print("Error: --max-line-length must be a positive integer", file=sys.stderr)
                sys.exit(1)
            config["max_line_length"] = int(value)
        else:
            positional.append(args[i])
            i += 1

    if len(positional) > 2:
        print("Error: Expected TITLE and optional AUTHOR, got {} arguments".format(
            len(positional)), file=sys.stderr)
        sys.exit(1)

    title = positional[0] if positional else ""
    author = positional[1] if len(positional) > 1 else ""

    lines = typeset(title, author, config=config)

    if as_json:
        print(json.dumps([line.to_dict() for line in lines], indent=2))
    else:
        for line in lines:
            print(format_line(line))


if __name__ == "__main__":
    main()
