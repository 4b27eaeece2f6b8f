"""Allow ``python -m tickline``."""

from tickline.cli import main

main()
