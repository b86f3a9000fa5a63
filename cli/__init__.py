"""CLI package for Passkeeper.

Thin interactive shell over the core generator and credential store.
"""

from cli.menu import main, main_menu

__all__ = [
    "main",
    "main_menu",
]
