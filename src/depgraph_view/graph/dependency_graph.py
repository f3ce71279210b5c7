"""Directed dependency graph of projects, backed by networkx."""

import networkx as nx
from typing import List
from .base import DependencyProvider, ProjectResolver
from .models import Dependency, Project
from ..ingest.models import WorkspaceDefinition
from ..utils.errors import GraphConstructionError
from ..utils.logging import get_logger

logger = get_logger("graph.dependency_graph")


class DependencyGraph(DependencyProvider):
    """Directed multigraph: nodes=projects, edges=upstream -> downstream, keyed by kind."""

    def __init__(self):
        self.graph = nx.MultiDiGraph()

    def add_project(self, project: Project) -> None:
        """Add a project node to the graph."""
        self.graph.add_node(project)

    def add_dependency(self, dependency: Dependency) -> None:
        """Add a dependency edge; adding the same edge twice is a no-op."""
        if dependency.upstream == dependency.downstream:
            raise GraphConstructionError(f"Project cannot depend on itself: {dependency.upstream.name}")

        if self.graph.has_edge(dependency.upstream, dependency.downstream, key=dependency.kind):
            return

        self.graph.add_edge(
            dependency.upstream,
            dependency.downstream,
            key=dependency.kind,
            dependency=dependency
        )
        logger.debug(f"Added dependency edge: {dependency}")

    def build_from_workspace(self, workspace: WorkspaceDefinition, resolver: ProjectResolver) -> None:
        """Build complete dependency graph from a workspace definition."""
        for definition in workspace.projects:
            project = resolver.resolve_project_by_name(definition.name)
            if project is None:
                raise GraphConstructionError(f"Project could not be resolved: {definition.name}")
            self.add_project(project)

        for definition in workspace.dependencies:
            upstream = resolver.resolve_project_by_name(definition.upstream)
            downstream = resolver.resolve_project_by_name(definition.downstream)
            if upstream is None or downstream is None:
                missing = definition.upstream if upstream is None else definition.downstream
                raise GraphConstructionError(
                    f"Dependency {definition.upstream} -> {definition.downstream} "
                    f"references unknown project: {missing}"
                )
            self.add_dependency(Dependency(upstream=upstream, downstream=downstream, kind=definition.kind))

        logger.info(
            f"Built dependency graph with {self.number_of_projects()} projects "
            f"and {self.number_of_dependencies()} dependencies"
        )

    def get_upstream_dependencies(self, project: Project) -> List[Dependency]:
        """Get dependencies on projects upstream of the given project."""
        if project not in self.graph:
            return []
        return [data["dependency"] for _, _, data in self.graph.in_edges(project, data=True)]

    def get_downstream_dependencies(self, project: Project) -> List[Dependency]:
        """Get dependencies of projects downstream of the given project."""
        if project not in self.graph:
            return []
        return [data["dependency"] for _, _, data in self.graph.out_edges(project, data=True)]

    def has_project(self, project: Project) -> bool:
        return project in self.graph

    def number_of_projects(self) -> int:
        return self.graph.number_of_nodes()

    def number_of_dependencies(self) -> int:
        return self.graph.number_of_edges()
