"""Guidebook CLI module.

Usage:
    guidebook render guides/rigit_zoo_guide.md -o out.html
    guidebook list
    guidebook serve --port 5000

Or directly:
    python -m guidebook.cli.app
"""

from guidebook.cli.app import build_parser, main

__all__ = ["build_parser", "main"]
