"""Configuration module: load and validate depgraph-view settings."""

from pathlib import Path
from typing import Dict, Any, Optional
from ..utils.errors import ConfigError
from ..utils.logging import get_logger
from .manager import load_config, read_config_file, deep_merge
from .paths import DEFAULTS_PATH, get_user_config_path, get_project_config_path

logger = get_logger("config")


def load_settings(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load settings: bundled defaults, user and project config, then config_path.
    
    Args:
        config_path: Optional explicit config YAML file (highest priority)
        
    Returns:
        Settings dictionary
        
    Raises:
        ConfigError: If settings cannot be loaded or are invalid
    """
    settings = read_config_file(DEFAULTS_PATH)
    deep_merge(settings, load_config())
    
    if config_path is not None:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        deep_merge(settings, read_config_file(path))
        logger.info(f"Loaded configuration from {config_path}")
    
    # Validate nested structures
    validation_issues = []
    
    actor = settings.get("actor")
    if actor is not None and not isinstance(actor, str):
        validation_issues.append("actor must be a string or null")
    
    plugins = settings.get("plugins")
    if not isinstance(plugins, dict):
        validation_issues.append("plugins is not a dict")
    elif not isinstance(plugins.get("installed", []), list):
        validation_issues.append("plugins.installed is not a list")
    
    logging_config = settings.get("logging")
    if not isinstance(logging_config, dict):
        validation_issues.append("logging is not a dict")
    elif not isinstance(logging_config.get("level", "WARNING"), str):
        validation_issues.append("logging.level is not a string")
    
    output_config = settings.get("output")
    if not isinstance(output_config, dict):
        validation_issues.append("output is not a dict")
    
    if validation_issues:
        raise ConfigError(f"Invalid configuration: {'; '.join(validation_issues)}")
    
    return settings


__all__ = [
    "load_settings",
    "load_config",
    "get_user_config_path",
    "get_project_config_path",
]
