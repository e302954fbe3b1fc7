"""Application layer - Dependency graph construction."""

from typing import Dict, Iterable

from wirekit.domain import ClassUnit, DependencyGraph, DuplicateClassNameError


class DependencyGraphBuilder:
    """Builds the class dependency graph from scanned classes.

    Nodes are class names; edges are constructor and guard dependencies. Names must
    be unique across the scanned tree: the same class discovered twice is merged,
    two different classes with one name are rejected.
    """

    def build(self, units: Iterable[ClassUnit]) -> DependencyGraph:
        """Build the graph.

        Args:
            units: Scanned classes, in discovery order.

        Returns:
            Graph whose node order follows discovery order.

        Raises:
            DuplicateClassNameError: If two modules define a class with the same name.
        """
        graph = DependencyGraph()
        owners: Dict[str, str] = {}

        for unit in units:
            owner = owners.setdefault(unit.name, unit.module)
            if owner != unit.module:
                raise DuplicateClassNameError(unit.name, [owner, unit.module])
            graph.add_node(unit.name, unit.metadata.dependency_names)

        return graph
