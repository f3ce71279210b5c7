"""Abstract interfaces for optional plugin capabilities."""

from abc import ABC, abstractmethod
from typing import List
from ..graph.models import Project


class TriggerConfigProvider(ABC):
    """
    Reports projects a project is configured to trigger as sub-jobs.
    
    Sub-job targets are recorded as-is: they are neither permission
    filtered nor followed by the component traversal.
    """
    
    @abstractmethod
    def get_trigger_targets(self, project: Project) -> List[Project]:
        """
        Get projects triggered by the given project's build steps.
        
        Args:
            project: Triggering project
            
        Returns:
            Triggered projects in configuration order, duplicates kept
        """
        pass


class ArtifactCopyProvider(ABC):
    """Reports projects whose build artifacts a project copies."""
    
    @abstractmethod
    def get_artifact_copy_sources(self, project: Project) -> List[Project]:
        """
        Get projects the given project copies artifacts from.
        
        Args:
            project: Copying project
            
        Returns:
            Source projects in configuration order
        """
        pass


class NoTriggerConfig(TriggerConfigProvider):
    """Used when the trigger capability is not installed."""
    
    def get_trigger_targets(self, project: Project) -> List[Project]:
        return []


class NoArtifactCopyConfig(ArtifactCopyProvider):
    """Used when the artifact-copy capability is not installed."""
    
    def get_artifact_copy_sources(self, project: Project) -> List[Project]:
        return []
