"""In-memory project repository built from a workspace definition."""

from typing import Dict, List, Optional
from .base import PermissionChecker, ProjectResolver
from .dependency_graph import DependencyGraph
from .models import BUILD_TRIGGER, Project
from ..ingest.models import (
    BUILDER_PROJECT_TYPES,
    BuilderDefinition,
    DependencyDefinition,
    ProjectDefinition,
    WorkspaceDefinition,
)
from ..utils.logging import get_logger

logger = get_logger("graph.repository")

EVERYONE = "*"


class ProjectRepository(PermissionChecker, ProjectResolver):
    """
    Projects of a workspace as seen by one actor.

    The dependency graph is rebuilt into a new DependencyGraph object
    whenever dependencies change, so a graph handed out earlier stays
    a consistent snapshot.
    """

    def __init__(self, workspace: WorkspaceDefinition, actor: Optional[str] = None):
        self.actor = actor
        self._admins = set(workspace.admins)
        self._definitions: Dict[str, ProjectDefinition] = {}
        self._projects: Dict[str, Project] = {}
        for definition in workspace.projects:
            self._definitions[definition.name] = definition
            self._projects[definition.name] = Project(name=definition.name)
        self._workspace = workspace.model_copy(update={"dependencies": list(workspace.dependencies)})
        self._graph = self._build_graph()

    def _build_graph(self) -> DependencyGraph:
        graph = DependencyGraph()
        graph.build_from_workspace(self._workspace, self)
        return graph

    @property
    def dependency_graph(self) -> DependencyGraph:
        """Current dependency graph snapshot."""
        return self._graph

    def resolve_project_by_name(self, name: str) -> Optional[Project]:
        """Resolve a full project name; a leading '/' is ignored."""
        project = self._projects.get(name.strip().lstrip("/"))
        if project is None:
            logger.debug(f"Project not found: {name}")
        return project

    def has_read_permission(self, project: Project) -> bool:
        definition = self._definitions.get(project.name)
        if definition is None:
            return False
        if self.actor is not None and self.actor in self._admins:
            return True
        if EVERYONE in definition.readers:
            return True
        return self.actor is not None and self.actor in definition.readers

    def get_builders(self, project: Project) -> List[BuilderDefinition]:
        """Builder steps of a project; empty for project types without builders."""
        definition = self._definitions.get(project.name)
        if definition is None or definition.type not in BUILDER_PROJECT_TYPES:
            return []
        return list(definition.builders)

    def get_projects(self) -> List[Project]:
        return list(self._projects.values())

    def add_dependency(self, upstream: str, downstream: str, kind: str = BUILD_TRIGGER) -> None:
        """Record a dependency and replace the graph snapshot."""
        dependencies = list(self._workspace.dependencies)
        dependencies.append(DependencyDefinition(upstream=upstream, downstream=downstream, kind=kind))
        workspace = self._workspace.model_copy(update={"dependencies": dependencies})
        graph = DependencyGraph()
        graph.build_from_workspace(workspace, self)
        self._workspace = workspace
        self._graph = graph
        logger.info(f"Dependency graph rebuilt after adding {upstream} -> {downstream}")
