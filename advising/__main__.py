"""Entry point for ``python -m advising``."""

from .cli import main

main()
