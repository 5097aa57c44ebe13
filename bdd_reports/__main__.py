"""
Entry point for running bdd_reports as a module.

Usage:
    python -m bdd_reports [command] [options]
"""

from bdd_reports.cli import main

if __name__ == "__main__":
    main()
