"""Two-tier configuration manager (user + project override)."""

import yaml
from pathlib import Path
from typing import Dict, Any
from .paths import get_user_config_path, get_project_config_path
from ..utils.errors import ConfigError
from ..utils.logging import get_logger

logger = get_logger("config.manager")


def read_config_file(path: Path) -> Dict[str, Any]:
    """
    Read one YAML config file.
    
    Args:
        path: Config file path
        
    Returns:
        Configuration dictionary (empty for an empty file)
        
    Raises:
        ConfigError: If the file is not valid YAML or not a dictionary
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            config = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}")
    except OSError as e:
        raise ConfigError(f"Error reading config file {path}: {e}")
    
    if not isinstance(config, dict):
        raise ConfigError(f"Config file must contain a dictionary: {path}")
    return config


def load_config() -> Dict[str, Any]:
    """
    Load user config with project override.
    
    Unreadable files are skipped with a warning.
    
    Returns:
        Configuration dictionary (project config overrides user config)
    """
    user_config_path = get_user_config_path()
    project_config_path = get_project_config_path()
    
    config = {}
    if user_config_path.exists():
        try:
            config = read_config_file(user_config_path)
        except ConfigError as e:
            logger.warning(f"Could not load user config from {user_config_path}: {e}")
    
    if project_config_path:
        try:
            deep_merge(config, read_config_file(project_config_path))
            logger.info(f"Loaded project config from {project_config_path}")
        except ConfigError as e:
            logger.warning(f"Could not load project config from {project_config_path}: {e}")
    
    return config


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """Deep merge override into base (mutates base)."""
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value
