"""Tests for the in-memory project repository."""

from pathlib import Path
import pytest
from depgraph_view.graph.component import ComponentCalculator
from depgraph_view.graph.models import Project
from depgraph_view.graph.repository import ProjectRepository
from depgraph_view.ingest.workspace_loader import load_workspace

FIXTURE = Path(__file__).parent.parent / "fixtures" / "workspace.sample.yaml"


@pytest.fixture
def workspace():
    """Load the sample workspace."""
    return load_workspace(str(FIXTURE))


class TestResolution:
    """Resolving projects by name."""
    
    def test_resolve_known_project(self, workspace):
        repository = ProjectRepository(workspace)
        assert repository.resolve_project_by_name("app") == Project(name="app")
    
    def test_resolve_strips_leading_slash(self, workspace):
        repository = ProjectRepository(workspace)
        assert repository.resolve_project_by_name("/app") == Project(name="app")
    
    def test_resolve_unknown_project(self, workspace):
        repository = ProjectRepository(workspace)
        assert repository.resolve_project_by_name("missing-job") is None


class TestReadPermission:
    """Read permission for different actors."""
    
    def test_anonymous_sees_public_projects_only(self, workspace):
        repository = ProjectRepository(workspace)
        
        assert repository.has_read_permission(Project(name="app"))
        assert not repository.has_read_permission(Project(name="deploy"))
    
    def test_listed_reader_sees_project(self, workspace):
        repository = ProjectRepository(workspace, actor="alice")
        assert repository.has_read_permission(Project(name="deploy"))
    
    def test_other_user_denied(self, workspace):
        repository = ProjectRepository(workspace, actor="bob")
        assert not repository.has_read_permission(Project(name="deploy"))
    
    def test_admin_sees_everything(self, workspace):
        repository = ProjectRepository(workspace, actor="root")
        assert repository.has_read_permission(Project(name="deploy"))
    
    def test_unknown_project_not_readable(self, workspace):
        repository = ProjectRepository(workspace, actor="root")
        assert not repository.has_read_permission(Project(name="ghost"))


class TestBuilders:
    """Builder steps are only exposed for project types that have them."""
    
    def test_freestyle_builders(self, workspace):
        repository = ProjectRepository(workspace)
        builders = repository.get_builders(Project(name="app"))
        assert [b.type for b in builders] == ["shell", "trigger", "copy_artifact"]
    
    def test_pipeline_has_no_builders(self, workspace):
        repository = ProjectRepository(workspace)
        assert repository.get_builders(Project(name="pipeline-job")) == []


class TestGraphSnapshot:
    """A calculator sees the graph as it was when it was created."""
    
    def test_change_after_construction_not_observed(self, workspace):
        repository = ProjectRepository(workspace)
        calculator = ComponentCalculator(
            [Project(name="unrelated")], repository.dependency_graph, repository
        )
        repository.add_dependency("unrelated", "docs")
        
        assert calculator.get_projects() == {Project(name="unrelated")}
    
    def test_change_before_construction_observed(self, workspace):
        repository = ProjectRepository(workspace)
        repository.add_dependency("unrelated", "docs")
        calculator = ComponentCalculator(
            [Project(name="unrelated")], repository.dependency_graph, repository
        )
        
        assert calculator.get_projects() == {Project(name="unrelated"), Project(name="docs")}
