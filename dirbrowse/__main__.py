"""Module entrypoint for ``python -m dirbrowse``.

All argument parsing and host setup happen in ``dirbrowse.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
