"""Allow ``python -m complex_lint``."""

from .cli import main

main()
