"""Pydantic models for projects and dependency edges."""

from typing import Tuple
from pydantic import BaseModel, Field

BUILD_TRIGGER = "build_trigger"
COPY_ARTIFACT = "copy_artifact"


class Project(BaseModel):
    """A build project, identified by its full name."""
    name: str = Field(..., min_length=1, description="Full project name, folders separated by '/'")

    class Config:
        """Pydantic config."""
        frozen = True

    def __str__(self) -> str:
        return self.name


class Dependency(BaseModel):
    """Directed edge: downstream project depends on upstream project."""
    upstream: Project = Field(..., description="Project the edge starts from")
    downstream: Project = Field(..., description="Project the edge points to")
    kind: str = Field(default=BUILD_TRIGGER, description="Dependency kind, part of edge identity")

    class Config:
        """Pydantic config."""
        frozen = True

    def sort_key(self) -> Tuple[str, str, str]:
        return (self.upstream.name, self.downstream.name, self.kind)

    def __str__(self) -> str:
        return f"{self.upstream.name} -> {self.downstream.name} ({self.kind})"
