"""depgraph-view - Permission-aware connected components of build dependency graphs."""

from typing import List, Optional
from .ingest.workspace_loader import load_workspace
from .graph.component import ComponentCalculator
from .graph.repository import ProjectRepository
from .plugins.registry import load_capabilities
from .contracts.component_output import ComponentOutput, build_component_output
from .config import load_settings
from .utils.logging import setup_logging, set_level, get_logger
from .utils.errors import DepGraphError

__version__ = "0.1.0"

__all__ = ["calculate_component", "ComponentCalculator"]

setup_logging()
logger = get_logger("depgraph_view")


def calculate_component(
    workspace_path: str,
    seeds: List[str],
    actor: Optional[str] = None,
    config_path: Optional[str] = None,
    log_level: Optional[str] = None
) -> ComponentOutput:
    """Calculate the connected component around the seed projects of a workspace."""
    try:
        settings = load_settings(config_path)
        set_level(log_level or settings["logging"].get("level", "WARNING"))
        if actor is None:
            actor = settings.get("actor")

        logger.info(f"Calculating component of {', '.join(seeds)} in {workspace_path}")

        workspace = load_workspace(workspace_path)
        repository = ProjectRepository(workspace, actor=actor)

        installed = workspace.plugins
        if installed is None:
            installed = settings["plugins"].get("installed", [])
        capabilities = load_capabilities(installed, repository)

        seed_projects = []
        for name in seeds:
            project = repository.resolve_project_by_name(name)
            if project is None:
                raise DepGraphError(f"Unknown seed project: {name}")
            seed_projects.append(project)

        calculator = ComponentCalculator(
            seed_projects,
            repository.dependency_graph,
            repository,
            trigger_provider=capabilities.trigger_provider,
            artifact_provider=capabilities.artifact_provider
        )
        output = build_component_output(calculator, [p.name for p in seed_projects], actor)

        logger.info(f"Component complete: {output.project_count} projects, {output.dependency_count} dependencies")
        return output

    except DepGraphError:
        raise
    except Exception as e:
        logger.error(f"Unexpected error during component calculation: {e}", exc_info=True)
        raise DepGraphError(f"Component calculation failed: {e}") from e
