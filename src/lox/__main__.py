"""
Main entry point for Lox when run as a module.
"""

import sys
from lox.lox_cli import main

if __name__ == '__main__':
    sys.exit(main())
