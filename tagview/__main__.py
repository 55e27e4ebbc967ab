"""Module entrypoint for ``python -m tagview``.

All argument parsing and rendering happen in ``tagview.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
