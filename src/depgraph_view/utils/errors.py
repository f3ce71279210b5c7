"""Custom exception classes for depgraph-view."""


class DepGraphError(Exception):
    """Base exception for all depgraph-view errors."""
    pass


class WorkspaceLoadError(DepGraphError):
    """Raised when a workspace definition cannot be loaded or is invalid."""
    pass


class GraphConstructionError(DepGraphError):
    """Raised when dependency graph construction fails."""
    pass


class ConfigError(DepGraphError):
    """Raised when configuration is invalid or missing."""
    pass
