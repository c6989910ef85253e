"""Allow ``python -m lineq``."""

from lineq.cli import main

main()
