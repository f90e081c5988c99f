"""
Package entry point.

Allows running the application via:

    python -m sisparse

This simply forwards execution to sisparse.cli.main().
"""

from sisparse.cli import main

if __name__ == "__main__":
    main()
