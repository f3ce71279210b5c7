"""Tests for plugin capability selection."""

import pytest
from depgraph_view.graph.repository import ProjectRepository
from depgraph_view.ingest.models import WorkspaceDefinition
from depgraph_view.plugins.base import NoArtifactCopyConfig, NoTriggerConfig
from depgraph_view.plugins.copyartifact import BuilderArtifactCopyProvider
from depgraph_view.plugins.parameterized_trigger import BuilderTriggerProvider
from depgraph_view.plugins.registry import SUPPORTED_PLUGINS, load_capabilities


@pytest.fixture
def repository():
    return ProjectRepository(WorkspaceDefinition(**{"projects": [{"name": "a"}]}))


class TestLoadCapabilities:
    """Providers are chosen once from the installed plugin list."""
    
    def test_all_installed(self, repository):
        capabilities = load_capabilities(list(SUPPORTED_PLUGINS), repository)
        
        assert isinstance(capabilities.trigger_provider, BuilderTriggerProvider)
        assert isinstance(capabilities.artifact_provider, BuilderArtifactCopyProvider)
    
    def test_none_installed(self, repository):
        capabilities = load_capabilities(None, repository)
        
        assert isinstance(capabilities.trigger_provider, NoTriggerConfig)
        assert isinstance(capabilities.artifact_provider, NoArtifactCopyConfig)
    
    def test_partial_install(self, repository):
        capabilities = load_capabilities(["copyartifact"], repository)
        
        assert isinstance(capabilities.trigger_provider, NoTriggerConfig)
        assert isinstance(capabilities.artifact_provider, BuilderArtifactCopyProvider)
    
    def test_unknown_plugin_ignored(self, repository, caplog):
        capabilities = load_capabilities(["nonexistent-plugin"], repository)
        
        assert isinstance(capabilities.trigger_provider, NoTriggerConfig)
        assert "unsupported plugin" in caplog.text
