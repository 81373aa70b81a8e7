"""Module entrypoint for ``python -m focusedit``.

All argument parsing and runtime setup happen in ``focusedit.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
