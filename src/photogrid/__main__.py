#!/usr/bin/env python3
"""
PhotoGrid - Entry point for python -m photogrid

This module allows the package to be run as a module:
    python -m photogrid
"""

import sys

from photogrid import main

if __name__ == "__main__":
    sys.exit(main())
