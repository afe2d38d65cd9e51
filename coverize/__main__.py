"""Package entry point for ``python -m coverize``.

WHY: Users run the generator as ``python -m coverize "Title" "Author"`` for a
one-off cover, or ``python -m coverize --serve`` for the HTTP API. Python's
``-m`` flag looks for ``__main__.py`` inside the package and executes it.
"""

from coverize.cli import main

if __name__ == "__main__":
    main()
