"""Package entry point for ``python -m cover_typeset``."""

from cover_typeset.cli import main

if __name__ == "__main__":
    main()
