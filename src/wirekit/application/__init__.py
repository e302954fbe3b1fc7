"""
Application layer - Use cases and orchestration.

This layer contains the container and the generation pipeline.
It depends only on the Domain layer.
"""

from .accessor import current_container, install_container, uninstall_container
from .container import DIContainer
from .emitter import RegistrationEmitter, instance_name, strip_timestamp
from .extractor import MetadataExtractor
from .generator import InjectionGenerator
from .graph_builder import DependencyGraphBuilder
from .lifetime_manager import LifetimeManager
from .resolver import DependencyResolver
from .scheduler import RegenerationScheduler
from .sequencer import TopologicalSequencer

__all__ = [
    # Container
    "DIContainer",
    "DependencyResolver",
    "LifetimeManager",
    "install_container",
    "current_container",
    "uninstall_container",
    # Generation
    "MetadataExtractor",
    "DependencyGraphBuilder",
    "TopologicalSequencer",
    "RegistrationEmitter",
    "InjectionGenerator",
    "RegenerationScheduler",
    "instance_name",
    "strip_timestamp",
]
