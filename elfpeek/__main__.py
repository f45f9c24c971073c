"""
elfpeek Entry Point
====================

Allows running the CLI via: python -m elfpeek
"""

from elfpeek.cli import main

if __name__ == "__main__":
    main()
