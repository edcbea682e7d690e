"""Entry point for Duke CLI when run as a module.

This allows the package to be run with: python -m duke_cli
"""

from .cli import main

if __name__ == "__main__":
    main()
