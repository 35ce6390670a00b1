"""Module entrypoint for running textfixer as ``python -m textfixer``."""

from __future__ import annotations

from textfixer.cli import main


if __name__ == "__main__":
    main()
