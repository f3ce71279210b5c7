"""Pydantic models for workspace definitions."""

from typing import List, Optional
from pydantic import BaseModel, Field

FREESTYLE = "freestyle"

# Project types whose configuration carries builder steps
BUILDER_PROJECT_TYPES = {FREESTYLE}


class TriggerConfigDefinition(BaseModel):
    """A single trigger configuration of a trigger builder."""
    projects: str = Field("", description="Comma-separated project names to trigger")
    block: bool = Field(False, description="Whether the triggering build waits for the sub-jobs")

    class Config:
        """Pydantic config."""
        extra = "ignore"


class BuilderDefinition(BaseModel):
    """One build step of a project (only trigger/copy_artifact steps matter here)."""
    type: str = Field(..., description="Builder type, e.g. 'trigger', 'copy_artifact', 'shell'")
    configs: List[TriggerConfigDefinition] = Field(
        default_factory=list, description="Trigger configs (trigger builders)"
    )
    projects: Optional[str] = Field(
        None, description="Comma-separated project names (shorthand for a single trigger config)"
    )
    project: Optional[str] = Field(None, description="Source project name (copy_artifact builders)")

    class Config:
        """Pydantic config."""
        extra = "ignore"

    def get_configs(self) -> List[TriggerConfigDefinition]:
        """Trigger configs, including the single-config shorthand."""
        configs = list(self.configs)
        if self.projects is not None:
            configs.append(TriggerConfigDefinition(projects=self.projects))
        return configs


class ProjectDefinition(BaseModel):
    """A project as declared in the workspace file."""
    name: str = Field(..., min_length=1, description="Full project name")
    type: str = Field(FREESTYLE, description="Project type (freestyle, matrix, pipeline, ...)")
    readers: List[str] = Field(default_factory=lambda: ["*"], description="Actors allowed to read; '*' for everyone")
    builders: List[BuilderDefinition] = Field(default_factory=list, description="Builder steps")

    class Config:
        """Pydantic config."""
        extra = "ignore"


class DependencyDefinition(BaseModel):
    """A declared dependency edge between two projects."""
    upstream: str = Field(..., min_length=1, description="Upstream project name")
    downstream: str = Field(..., min_length=1, description="Downstream project name")
    kind: str = Field("build_trigger", description="Dependency kind")


class WorkspaceDefinition(BaseModel):
    """Collection of projects, dependencies and deployment facts."""
    projects: List[ProjectDefinition] = Field(default_factory=list, description="Declared projects")
    dependencies: List[DependencyDefinition] = Field(default_factory=list, description="Declared dependencies")
    admins: List[str] = Field(default_factory=list, description="Actors that can read every project")
    plugins: Optional[List[str]] = Field(
        None, description="Installed plugin ids; None means use the configured default"
    )
