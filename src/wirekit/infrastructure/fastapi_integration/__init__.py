"""
FastAPI integration module.

Lets FastAPI endpoints obtain wired instances from the DI container.
"""

from .integration import attach_container, create_app_dependency, create_fastapi_dependency

__all__ = [
    "create_fastapi_dependency",
    "create_app_dependency",
    "attach_container",
]
