"""Module entrypoint for ``python -m sidebar_builder``.

This keeps module-mode execution behavior identical to the CLI script.
All argument parsing happens in ``sidebar_builder.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
