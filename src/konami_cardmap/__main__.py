"""Allow ``python -m konami_cardmap``."""

from konami_cardmap.cli import main

main()
