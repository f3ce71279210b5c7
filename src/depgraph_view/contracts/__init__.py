from .component_output import ComponentOutput, DependencyOutput, build_component_output

__all__ = [
    "ComponentOutput",
    "DependencyOutput",
    "build_component_output",
]
