#!/usr/bin/env python3
"""Entry point for ``python -m phylakit``."""

import sys

from phylakit.cli import main

if __name__ == '__main__':
    sys.exit(main())
