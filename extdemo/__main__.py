"""Entry point for ``python -m extdemo``."""
import sys

from extdemo.cli import main

if __name__ == "__main__":
    sys.exit(main())
