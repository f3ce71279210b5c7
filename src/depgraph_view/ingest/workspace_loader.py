"""Load and validate workspace definition files (YAML or JSON)."""

from collections import Counter
from pathlib import Path
import yaml
from pydantic import ValidationError
from ..utils.errors import WorkspaceLoadError
from ..utils.logging import get_logger
from .models import WorkspaceDefinition

logger = get_logger("ingest.workspace_loader")


def load_workspace(workspace_path: str) -> WorkspaceDefinition:
    """
    Load and validate a workspace definition file.

    JSON documents are accepted as well, since JSON is valid YAML.

    Args:
        workspace_path: Path to workspace YAML/JSON file

    Returns:
        Validated WorkspaceDefinition

    Raises:
        WorkspaceLoadError: If file cannot be loaded or is invalid
    """
    path = Path(workspace_path)

    if not path.exists():
        raise WorkspaceLoadError(
            f"Workspace file not found: {workspace_path}. "
            "Please check the file path and ensure the file exists."
        )

    if not path.is_file():
        raise WorkspaceLoadError(
            f"Path is not a file: {workspace_path}. "
            "Please provide a workspace YAML or JSON file."
        )

    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise WorkspaceLoadError(f"Invalid YAML in workspace file: {e}")
    except OSError as e:
        raise WorkspaceLoadError(
            f"Error reading workspace file: {e}. "
            "Please check file permissions and try again."
        )

    if data is None:
        logger.warning(f"Workspace file {workspace_path} is empty")
        data = {}

    if not isinstance(data, dict):
        raise WorkspaceLoadError("Workspace file must contain a dictionary")

    try:
        workspace = WorkspaceDefinition(**data)
    except ValidationError as e:
        raise WorkspaceLoadError(f"Invalid workspace structure: {e}")

    duplicates = [name for name, count in Counter(p.name for p in workspace.projects).items() if count > 1]
    if duplicates:
        raise WorkspaceLoadError(f"Duplicate project names in workspace: {', '.join(sorted(duplicates))}")

    logger.info(
        f"Loaded workspace from {workspace_path} "
        f"(projects: {len(workspace.projects)}, "
        f"dependencies: {len(workspace.dependencies)})"
    )

    return workspace
