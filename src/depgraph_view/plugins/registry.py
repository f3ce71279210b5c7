"""Declarative registry of optional plugin capabilities."""

from dataclasses import dataclass, field
from typing import Iterable, Optional
from .base import ArtifactCopyProvider, NoArtifactCopyConfig, NoTriggerConfig, TriggerConfigProvider
from .copyartifact import BuilderArtifactCopyProvider
from .parameterized_trigger import BuilderTriggerProvider
from ..graph.repository import ProjectRepository
from ..utils.logging import get_logger

logger = get_logger("plugins.registry")

TRIGGER = "trigger"
ARTIFACT_COPY = "artifact_copy"

SUPPORTED_PLUGINS = {
    "parameterized-trigger": {
        "capability": TRIGGER,
        "provider": BuilderTriggerProvider,
    },
    "copyartifact": {
        "capability": ARTIFACT_COPY,
        "provider": BuilderArtifactCopyProvider,
    },
}


@dataclass
class Capabilities:
    """Capability providers selected for one deployment."""
    trigger_provider: TriggerConfigProvider = field(default_factory=NoTriggerConfig)
    artifact_provider: ArtifactCopyProvider = field(default_factory=NoArtifactCopyConfig)


def load_capabilities(installed: Optional[Iterable[str]], repository: ProjectRepository) -> Capabilities:
    """
    Select capability providers for the installed plugins.
    
    Args:
        installed: Installed plugin ids (None or empty means none installed)
        repository: Repository the providers resolve projects against
        
    Returns:
        Capabilities with real providers for installed plugins and
        null providers for the rest
    """
    capabilities = Capabilities()
    for plugin_id in installed or []:
        entry = SUPPORTED_PLUGINS.get(plugin_id)
        if entry is None:
            logger.warning(f"Ignoring unsupported plugin: {plugin_id}")
            continue
        provider = entry["provider"](repository)
        if entry["capability"] == TRIGGER:
            capabilities.trigger_provider = provider
        else:
            capabilities.artifact_provider = provider
        logger.debug(f"Enabled plugin capability: {plugin_id}")
    return capabilities
