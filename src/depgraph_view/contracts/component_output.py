"""Pydantic model for the component output JSON (versioned, stable, explicit)."""

from typing import Dict, List, Optional
from pydantic import BaseModel, Field
from ..graph.component import ComponentCalculator
from ..graph.models import Dependency

OUTPUT_VERSION = "1.0.0"


class DependencyOutput(BaseModel):
    """A dependency edge by project names."""
    upstream: str = Field(..., description="Upstream project name")
    downstream: str = Field(..., description="Downstream project name")
    kind: str = Field(..., description="Dependency kind")

    @classmethod
    def from_dependency(cls, dependency: Dependency) -> "DependencyOutput":
        return cls(
            upstream=dependency.upstream.name,
            downstream=dependency.downstream.name,
            kind=dependency.kind
        )


class ComponentOutput(BaseModel):
    """Component output contract - versioned, stable, explicit."""
    version: str = Field(default=OUTPUT_VERSION, description="Output contract version")
    seeds: List[str] = Field(default_factory=list, description="Seed project names")
    actor: Optional[str] = Field(default=None, description="Actor whose permissions were applied (None = anonymous)")
    projects: List[str] = Field(default_factory=list, description="Projects in the component, sorted")
    dependencies: List[DependencyOutput] = Field(default_factory=list, description="Dependency edges, sorted")
    sub_jobs: Dict[str, List[str]] = Field(default_factory=dict, description="Triggering project -> triggered sub-jobs")
    copied_artifacts: List[DependencyOutput] = Field(default_factory=list, description="Artifact source -> copying project, sorted")
    project_count: int = Field(default=0, ge=0, description="Number of projects in the component")
    dependency_count: int = Field(default=0, ge=0, description="Number of dependency edges in the component")

    class Config:
        """Pydantic config."""
        json_schema_extra = {
            "example": {
                "version": "1.0.0",
                "seeds": ["app"],
                "actor": "alice",
                "projects": ["app", "lib"],
                "dependencies": [{"upstream": "lib", "downstream": "app", "kind": "build_trigger"}],
                "sub_jobs": {"app": ["app-integration"]},
                "copied_artifacts": [{"upstream": "lib", "downstream": "app", "kind": "copy_artifact"}],
                "project_count": 2,
                "dependency_count": 1
            }
        }


def build_component_output(
    calculator: ComponentCalculator,
    seeds: List[str],
    actor: Optional[str] = None
) -> ComponentOutput:
    """Fill the output contract from a calculator's results."""
    projects = sorted(project.name for project in calculator.get_projects())
    dependencies = sorted(calculator.get_dependencies(), key=Dependency.sort_key)
    copied = sorted(calculator.get_copied_artifacts(), key=Dependency.sort_key)
    sub_jobs = {
        project.name: [target.name for target in targets]
        for project, targets in sorted(calculator.get_sub_jobs().items(), key=lambda item: item[0].name)
    }
    return ComponentOutput(
        seeds=list(seeds),
        actor=actor,
        projects=projects,
        dependencies=[DependencyOutput.from_dependency(d) for d in dependencies],
        sub_jobs=sub_jobs,
        copied_artifacts=[DependencyOutput.from_dependency(d) for d in copied],
        project_count=len(projects),
        dependency_count=len(dependencies)
    )
