"""Connected component of the dependency graph around a set of projects."""

from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Optional, Set, Tuple
from .base import DependencyProvider, PermissionChecker
from .models import COPY_ARTIFACT, Dependency, Project
from ..plugins.base import ArtifactCopyProvider, NoArtifactCopyConfig, NoTriggerConfig, TriggerConfigProvider
from ..utils.logging import get_logger

logger = get_logger("graph.component")


class ComponentCalculator:
    """
    Calculates the connected component of the dependency graph containing
    a set of projects.

    After calculation the projects (nodes) and dependencies (edges) of the
    component can be read back, together with the sub-jobs triggered by
    component projects and the artifacts they copy from other projects.
    Projects the permission checker rejects are left out, and so are the
    edges leading to them.

    The calculation runs once, on first access; results are read-only.
    """

    def __init__(
        self,
        projects: Iterable[Project],
        dependency_graph: DependencyProvider,
        permissions: PermissionChecker,
        trigger_provider: Optional[TriggerConfigProvider] = None,
        artifact_provider: Optional[ArtifactCopyProvider] = None,
    ):
        if projects is None:
            raise TypeError("projects must not be None")
        self.dependency_graph = dependency_graph
        self.permissions = permissions
        self.trigger_provider = trigger_provider or NoTriggerConfig()
        self.artifact_provider = artifact_provider or NoArtifactCopyConfig()
        self._visited_projects: Set[Project] = set(projects)
        self._visited_dependencies: Set[Dependency] = set()
        self._copied_artifacts: Set[Dependency] = set()
        self._sub_jobs: Dict[Project, List[Project]] = {}
        self._projects_view: FrozenSet[Project] = frozenset()
        self._dependencies_view: FrozenSet[Dependency] = frozenset()
        self._copied_artifacts_view: FrozenSet[Dependency] = frozenset()
        self._sub_jobs_view: Mapping[Project, Tuple[Project, ...]] = MappingProxyType({})
        self.calculated = False

    def calculate_nodes_and_dependencies(self) -> None:
        """Run the traversal unless it already ran."""
        if self.calculated:
            return

        frontier = set(self._visited_projects)
        rounds = 0
        while frontier:
            rounds += 1
            logger.debug(f"Traversal round {rounds}: expanding {len(frontier)} projects")
            new_projects = self._expand(frontier)
            self._visited_projects.update(new_projects)
            frontier = new_projects

        self._projects_view = frozenset(self._visited_projects)
        self._dependencies_view = frozenset(self._visited_dependencies)
        self._copied_artifacts_view = frozenset(self._copied_artifacts)
        self._sub_jobs_view = MappingProxyType(
            {project: tuple(targets) for project, targets in self._sub_jobs.items()}
        )
        self.calculated = True
        logger.info(
            f"Component calculated in {rounds} rounds: {len(self._visited_projects)} projects, "
            f"{len(self._visited_dependencies)} dependencies, {len(self._sub_jobs)} projects with sub-jobs, "
            f"{len(self._copied_artifacts)} copied artifacts"
        )

    def _expand(self, frontier: Set[Project]) -> Set[Project]:
        new_projects: Set[Project] = set()
        for project in frontier:
            if not self.permissions.has_read_permission(project):
                continue

            new_projects.update(
                self._add_new_dependencies(self.dependency_graph.get_upstream_dependencies(project), True)
            )
            new_projects.update(
                self._add_new_dependencies(self.dependency_graph.get_downstream_dependencies(project), False)
            )

            # Sub-jobs and copy sources are recorded without a permission check
            targets = self.trigger_provider.get_trigger_targets(project)
            if targets:
                self._sub_jobs.setdefault(project, []).extend(targets)

            for source in self.artifact_provider.get_artifact_copy_sources(project):
                self._copied_artifacts.add(Dependency(upstream=source, downstream=project, kind=COPY_ARTIFACT))
        return new_projects

    def _add_new_dependencies(self, dependencies: Iterable[Dependency], is_upstream: bool) -> Set[Project]:
        new_projects: Set[Project] = set()
        for dependency in dependencies:
            if dependency in self._visited_dependencies:
                continue
            project_to_add = dependency.upstream if is_upstream else dependency.downstream
            if not self.permissions.has_read_permission(project_to_add):
                logger.debug(f"Skipping dependency without read permission: {dependency}")
                continue
            self._visited_dependencies.add(dependency)
            if project_to_add not in self._visited_projects:
                new_projects.add(project_to_add)
        return new_projects

    def get_projects(self) -> FrozenSet[Project]:
        """
        Calculates the connected component if necessary.

        Returns:
            Projects (nodes) in the connected component
        """
        self.calculate_nodes_and_dependencies()
        return self._projects_view

    def get_dependencies(self) -> FrozenSet[Dependency]:
        """
        Calculates the connected component if necessary.

        Returns:
            Dependencies (edges) in the connected component
        """
        self.calculate_nodes_and_dependencies()
        return self._dependencies_view

    def get_sub_jobs(self) -> Mapping[Project, Tuple[Project, ...]]:
        """Triggering project -> triggered sub-jobs, duplicates kept."""
        self.calculate_nodes_and_dependencies()
        return self._sub_jobs_view

    def get_copied_artifacts(self) -> FrozenSet[Dependency]:
        """Edges from the project whose artifacts are copied to the copying project."""
        self.calculate_nodes_and_dependencies()
        return self._copied_artifacts_view
