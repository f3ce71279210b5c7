"""Optional plugin capabilities: sub-job triggers and copied artifacts."""

from .base import ArtifactCopyProvider, NoArtifactCopyConfig, NoTriggerConfig, TriggerConfigProvider
from .registry import SUPPORTED_PLUGINS, Capabilities, load_capabilities

__all__ = [
    "TriggerConfigProvider",
    "ArtifactCopyProvider",
    "NoTriggerConfig",
    "NoArtifactCopyConfig",
    "SUPPORTED_PLUGINS",
    "Capabilities",
    "load_capabilities",
]
