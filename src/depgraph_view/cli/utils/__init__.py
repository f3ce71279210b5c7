"""CLI utilities package."""

from typing import Optional, Tuple, List
from ...config import load_settings
from ...contracts.component_output import ComponentOutput
from ...utils.logging import get_logger
from .file_resolver import resolve_file_path

logger = get_logger("cli.utils")


def format_error(message: str, suggestion: Optional[str] = None) -> str:
    """
    Format error message with optional suggestion.
    
    Args:
        message: Error message
        suggestion: Optional suggestion or help text
        
    Returns:
        Formatted error string
    """
    error = f"Error: {message}"
    if suggestion:
        error += f"\nTip: {suggestion}"
    return error


def run_component(
    workspace: str,
    seeds: List[str],
    actor: Optional[str] = None,
    config_path: Optional[str] = None,
    verbose: bool = False
) -> Tuple[ComponentOutput, dict]:
    """
    Shared component execution helper.
    
    Returns:
        Tuple of (ComponentOutput, settings)
        
    Raises:
        DepGraphError: If loading or calculation fails
    """
    from ... import calculate_component
    
    settings = load_settings(config_path)
    output = calculate_component(
        workspace,
        seeds,
        actor=actor,
        config_path=config_path,
        log_level="DEBUG" if verbose else None
    )
    return output, settings


__all__ = ["resolve_file_path", "run_component", "format_error"]
