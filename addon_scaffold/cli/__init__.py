"""
CLI module for the add-on scaffold.

This module provides the command-line interface, including the main entry
point installed as the ``mcaddon`` console script.
"""

from .commands import main

__all__ = ["main"]
