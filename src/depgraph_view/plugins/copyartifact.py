"""Copied-artifact discovery from copy_artifact build steps."""

from typing import List
from .base import ArtifactCopyProvider
from ..graph.models import Project
from ..graph.repository import ProjectRepository
from ..utils.logging import get_logger

logger = get_logger("plugins.copyartifact")

COPY_ARTIFACT_BUILDER = "copy_artifact"


class BuilderArtifactCopyProvider(ArtifactCopyProvider):
    """Reads artifact sources from the 'copy_artifact' builders of a project."""

    def __init__(self, repository: ProjectRepository):
        self.repository = repository

    def get_artifact_copy_sources(self, project: Project) -> List[Project]:
        sources = []
        for builder in self.repository.get_builders(project):
            if builder.type != COPY_ARTIFACT_BUILDER or not builder.project:
                continue
            source = self.repository.resolve_project_by_name(builder.project)
            if source is None:
                logger.debug(f"Skipping unknown artifact source '{builder.project}' of {project.name}")
                continue
            sources.append(source)
        return sources
