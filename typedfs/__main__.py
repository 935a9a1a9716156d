"""Module entrypoint for ``python -m typedfs``."""

from .cli import main


if __name__ == "__main__":
    main()
