"""Allow ``python -m schack``."""

from schack.app import main

main()
