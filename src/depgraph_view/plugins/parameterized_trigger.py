"""Sub-job discovery from trigger build steps."""

from typing import List
from .base import TriggerConfigProvider
from ..graph.models import Project
from ..graph.repository import ProjectRepository
from ..utils.logging import get_logger

logger = get_logger("plugins.parameterized_trigger")

TRIGGER_BUILDER = "trigger"


def split_project_list(projects: str) -> List[str]:
    """Split a comma-separated project list, dropping blank entries."""
    return [name.strip() for name in projects.split(",") if name.strip()]


class BuilderTriggerProvider(TriggerConfigProvider):
    """Reads trigger targets from the 'trigger' builders of a project."""

    def __init__(self, repository: ProjectRepository):
        self.repository = repository

    def get_trigger_targets(self, project: Project) -> List[Project]:
        targets = []
        for builder in self.repository.get_builders(project):
            if builder.type != TRIGGER_BUILDER:
                continue
            for config in builder.get_configs():
                for name in split_project_list(config.projects):
                    target = self.repository.resolve_project_by_name(name)
                    if target is None:
                        logger.debug(f"Skipping unknown sub-job '{name}' triggered by {project.name}")
                        continue
                    targets.append(target)
        return targets
