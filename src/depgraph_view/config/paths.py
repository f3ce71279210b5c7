"""Config path resolution for two-tier config system."""

from pathlib import Path
from typing import Optional

DEFAULTS_PATH = Path(__file__).parent / "defaults.yaml"


def get_user_config_path() -> Path:
    """Get user config path: ~/.depgraph/config.yaml"""
    home = Path.home()
    return home / ".depgraph" / "config.yaml"


def get_project_config_path() -> Optional[Path]:
    """Get project config path: .depgraph/config.yaml (from current working directory)"""
    cwd = Path.cwd()
    project_config = cwd / ".depgraph" / "config.yaml"
    if project_config.exists():
        return project_config
    return None
