"""Application layer - Cycle detection and initialization ordering."""

from typing import List, Set

from wirekit.domain import CyclicDependencyError, DependencyGraph


class TopologicalSequencer:
    """Orders graph nodes so every node comes after the nodes it depends on.

    Depth-first search with an in-progress set. Roots are taken in graph order and
    dependencies in declaration order, so independent nodes keep their discovery
    order and the output is stable across runs. Dependencies that are not nodes of
    the graph are skipped.
    """

    def order(self, graph: DependencyGraph) -> List[str]:
        """Compute the initialization order.

        Args:
            graph: The dependency graph.

        Returns:
            Every node exactly once, dependencies first.

        Raises:
            CyclicDependencyError: If the graph contains a cycle. No ordering is returned.

        Example:
            >>> graph = DependencyGraph()
            >>> graph.add_node("UserController", ("UserService",))
            >>> graph.add_node("UserService")
            >>> TopologicalSequencer().order(graph)
            ['UserService', 'UserController']
        """
        visited: Set[str] = set()
        path: List[str] = []
        ordering: List[str] = []

        for name in graph.names():
            self._visit(name, graph, visited, path, ordering)

        return ordering

    def _visit(
        self,
        name: str,
        graph: DependencyGraph,
        visited: Set[str],
        path: List[str],
        ordering: List[str],
    ) -> None:
        if name in visited:
            return
        if name in path:
            raise CyclicDependencyError(path[path.index(name) :] + [name])

        path.append(name)
        for dependency in graph.dependencies_of(name):
            if dependency in graph:
                self._visit(dependency, graph, visited, path, ordering)
        path.pop()

        visited.add(name)
        ordering.append(name)
