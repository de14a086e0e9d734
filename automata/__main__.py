"""Entrypoint for `python -m automata`."""

from .cli import main


if __name__ == "__main__":
    main()
