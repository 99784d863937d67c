"""Module entrypoint for ``python -m dragtree``."""

from .cli import main


if __name__ == "__main__":
    main()
