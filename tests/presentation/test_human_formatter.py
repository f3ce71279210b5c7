"""Tests for the human-readable formatter."""

import pytest
from depgraph_view.contracts.component_output import ComponentOutput, DependencyOutput
from depgraph_view.presentation.human_formatter import format_component_summary


@pytest.fixture
def sample_output():
    return ComponentOutput(
        seeds=["app"],
        actor="alice",
        projects=["app", "lib"],
        dependencies=[DependencyOutput(upstream="lib", downstream="app", kind="build_trigger")],
        sub_jobs={"app": ["app-it", "docs"]},
        copied_artifacts=[DependencyOutput(upstream="lib", downstream="app", kind="copy_artifact")],
        project_count=2,
        dependency_count=1
    )


class TestFormatComponentSummary:
    
    def test_ascii_summary(self, sample_output):
        text = format_component_summary(sample_output, ascii_mode=True)
        
        assert "Dependency component of: app" in text
        assert "Viewed as: alice" in text
        assert "lib -> app  [build_trigger]" in text
        assert "app: app-it, docs" in text
        assert "COPIED ARTIFACTS" in text
    
    def test_empty_sections(self):
        output = ComponentOutput(seeds=["x"], projects=["x"], project_count=1)
        text = format_component_summary(output, ascii_mode=True)
        
        assert "Viewed as: anonymous" in text
        assert "(none)" in text
        assert "SUB-JOBS" not in text
        assert "COPIED ARTIFACTS" not in text
    
    def test_ascii_from_environment(self, sample_output, monkeypatch):
        monkeypatch.setenv("DEPGRAPH_ASCII", "1")
        text = format_component_summary(sample_output)
        
        assert "->" in text
        assert "→" not in text
