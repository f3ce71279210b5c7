"""Human-friendly output formatter - converts the component output to readable text."""

import os
from typing import List, Optional
from ..contracts.component_output import ComponentOutput, DependencyOutput


def _use_ascii(ascii_mode: Optional[bool] = None) -> bool:
    """Resolve whether to use ASCII output (checked at format time)."""
    if ascii_mode is not None:
        return bool(ascii_mode)
    return os.environ.get("DEPGRAPH_ASCII", "").lower() in ("1", "true", "yes")


def _box(title: str, width: int = 65, ascii_mode: bool = False) -> List[str]:
    """Return box-drawing header lines."""
    b = {"tl": "+", "tr": "+", "h": "-", "v": "|"} if ascii_mode else {"tl": "┌", "tr": "┐", "h": "─", "v": "│"}
    h = b["h"] * (width - 2)
    return [
        b["tl"] + h + b["tr"],
        f"{b['v']} {title:<{width - 4}} {b['v']}",
        ("+" if ascii_mode else "└") + h + ("+" if ascii_mode else "┘"),
        "",
    ]


def _section(title: str, width: int = 65) -> List[str]:
    """Return section divider."""
    h = "-" * width
    return [h, title.center(width), h]


def _edge(edge: DependencyOutput, ascii_mode: bool) -> str:
    arrow = "->" if ascii_mode else "→"
    return f"  {edge.upstream} {arrow} {edge.downstream}  [{edge.kind}]"


def format_component_summary(output: ComponentOutput, ascii_mode: Optional[bool] = None) -> str:
    """
    Format a component output as a plain listing.

    Args:
        output: ComponentOutput to format
        ascii_mode: Force ASCII characters (default: DEPGRAPH_ASCII env var)

    Returns:
        Multi-line human-readable text
    """
    ascii_mode = _use_ascii(ascii_mode)
    bullet = "*" if ascii_mode else "•"
    lines = _box(f"Dependency component of: {', '.join(output.seeds) or '(none)'}", ascii_mode=ascii_mode)
    lines.append(f"Viewed as: {output.actor or 'anonymous'}")
    lines.append(f"Projects: {output.project_count}   Dependencies: {output.dependency_count}")
    lines.append("")

    lines.extend(_section("PROJECTS"))
    lines.extend(f"  {bullet} {name}" for name in output.projects)
    lines.append("")

    lines.extend(_section("DEPENDENCIES"))
    if output.dependencies:
        lines.extend(_edge(edge, ascii_mode) for edge in output.dependencies)
    else:
        lines.append("  (none)")
    lines.append("")

    if output.sub_jobs:
        lines.extend(_section("SUB-JOBS"))
        for project, targets in output.sub_jobs.items():
            lines.append(f"  {project}: {', '.join(targets)}")
        lines.append("")

    if output.copied_artifacts:
        lines.extend(_section("COPIED ARTIFACTS"))
        lines.extend(_edge(edge, ascii_mode) for edge in output.copied_artifacts)
        lines.append("")

    return "\n".join(lines)
