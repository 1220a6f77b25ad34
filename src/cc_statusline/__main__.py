#!/usr/bin/env python3
"""Entry point for running the statusline as a module."""

import sys

from cc_statusline.main import main

if __name__ == "__main__":
    sys.exit(main())
