"""Application layer - Reading declared DI metadata off a class."""

import inspect
from typing import Any, Iterable, List, Type

from wirekit.application.introspection import (
    annotation_name,
    injectable_parameters,
    is_forward_reference,
    is_injectable_type,
)
from wirekit.domain import ClassMetadata, MetadataStore, metadata_store
from wirekit.domain import metadata as keys


class MetadataExtractor:
    """Extracts identity, kind and dependency names from one class.

    Pure function over the class and the metadata store: no I/O, never raises for
    missing metadata. A class carrying no metadata yields empty collections.

    Attributes:
        _store: Metadata store the decorators wrote into.
    """

    def __init__(self, store: MetadataStore = metadata_store) -> None:
        self._store = store

    def extract(self, cls: Type) -> ClassMetadata:
        """Extract the metadata of a class.

        Args:
            cls: The class to inspect.

        Returns:
            The class metadata.

        Example:
            >>> @controller("/users")
            ... @use_guards(AuthGuard)
            ... class UserController:
            ...     def __init__(self, service: UserService): ...
            >>> MetadataExtractor().extract(UserController).dependency_names
            ('UserService', 'AuthGuard')
        """
        return ClassMetadata(
            name=cls.__name__,
            is_injectable=bool(self._store.get(keys.INJECTABLE, cls, False)),
            is_socket_controller=bool(self._store.get(keys.SOCKET, cls, False)),
            kind=self._store.get(keys.KIND, cls),
            constructor_dependency_names=tuple(self.constructor_dependency_names(cls)),
            guard_dependency_names=tuple(self.guard_dependency_names(cls)),
        )

    def constructor_dependency_names(self, cls: Type) -> List[str]:
        """Names of constructor parameter types that are classes, in declaration order."""
        names = []
        for _, annotation in injectable_parameters(cls):
            if is_injectable_type(annotation) or is_forward_reference(annotation):
                names.append(annotation_name(annotation))
        return names

    def guard_dependency_names(self, cls: Type) -> List[str]:
        """Names of guards attached to the class or any of its methods, without duplicates."""
        guards: List[Any] = list(self._store.get(keys.CLASS_GUARDS, cls, []))
        for function in self._methods(cls):
            guards.extend(self._store.get(keys.METHOD_GUARDS, function, []))
        return list(dict.fromkeys(annotation_name(guard) for guard in guards))

    @staticmethod
    def _methods(cls: Type) -> Iterable[Any]:
        # Includes inherited methods; the most derived definition wins.
        seen = set()
        for klass in cls.__mro__:
            if klass is object:
                continue
            for name, member in vars(klass).items():
                if name == "__init__" or name in seen:
                    continue
                seen.add(name)
                if isinstance(member, (staticmethod, classmethod)):
                    member = member.__func__
                if inspect.isfunction(member):
                    yield member
