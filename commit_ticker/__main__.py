"""Run commit-ticker with ``python -m commit_ticker``."""

from commit_ticker.cli import main

main()
