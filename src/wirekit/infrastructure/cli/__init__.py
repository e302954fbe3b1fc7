"""
CLI module.

Provides the ``wirekit`` command.
"""

from .main import build_generator, cli

__all__ = [
    "cli",
    "build_generator",
]
