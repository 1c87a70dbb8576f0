"""Command-line interface module for xml-tag-checker.

This module provides the CLI that reads files line by line, checks their tag
nesting, and prints the resulting reports.
"""

from .main import main

__all__ = ["main"]
