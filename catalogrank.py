#!/usr/bin/env python3
"""Wrapper script to run the catalog ranking CLI."""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from catalogrank.cli import main
sys.exit(main())
