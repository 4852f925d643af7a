#!/usr/bin/env python3
"""Thin wrapper: run beargit CLI. Usage: python main.py <cmd> ... (same as the beargit script)."""

import sys

if __name__ == "__main__":
    from beargit.cli import main
    sys.exit(main())
