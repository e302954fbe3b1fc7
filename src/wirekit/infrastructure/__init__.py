"""
Infrastructure layer - External integrations.

This layer contains the filesystem scanner and writer, the command line,
and integrations with external frameworks and tools.
It depends on both Application and Domain layers.
"""

from . import cli, fastapi_integration, filesystem, testing

__all__ = [
    "cli",
    "fastapi_integration",
    "filesystem",
    "testing",
]
