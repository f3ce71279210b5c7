"""Abstract interfaces for the collaborators of the component calculator."""

from abc import ABC, abstractmethod
from typing import List, Optional
from .models import Dependency, Project


class PermissionChecker(ABC):
    """
    Answers read-permission questions for the current actor.
    
    A project the actor cannot read is left out of traversal results;
    it is never reported as an error.
    """
    
    @abstractmethod
    def has_read_permission(self, project: Project) -> bool:
        """
        Check whether the current actor may read a project.
        
        Args:
            project: Project to check
            
        Returns:
            True if the project is visible to the actor
        """
        pass


class DependencyProvider(ABC):
    """
    Source of upstream/downstream dependency edges.
    
    Two calls for the same project must return equal Dependency values
    so that already visited edges can be recognised.
    """
    
    @abstractmethod
    def get_upstream_dependencies(self, project: Project) -> List[Dependency]:
        """Return edges whose downstream end is the given project."""
        pass
    
    @abstractmethod
    def get_downstream_dependencies(self, project: Project) -> List[Dependency]:
        """Return edges whose upstream end is the given project."""
        pass


class ProjectResolver(ABC):
    """Resolves project references found in configuration data."""
    
    @abstractmethod
    def resolve_project_by_name(self, name: str) -> Optional[Project]:
        """Return the project with the given full name, or None."""
        pass
