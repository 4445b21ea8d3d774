"""
Graphviz DOT diagram generator for value graphs.

Renders one or more named roots (e.g. an original and its copy) into a
single DOT graph. Every distinct container becomes exactly one node, so
aliasing is visible: a shallow copy and its source point at the same row
nodes, while a deep copy gets its own.

Supports two modes:
    - SIMPLE: Container kind and size only
    - DETAILED: Leaf slots inlined into each container label
"""

from enum import Enum
from typing import Any, Dict, List, Tuple

from structclone.values import CONTAINER_KINDS, Member, PathSegment, children, classify

# Labels longer than this are shortened
MAX_LEAF_LABEL = 40


class DotMode(Enum):
    """Visualization modes for DOT output."""
    SIMPLE = "simple"        # Containers and references
    DETAILED = "detailed"    # Include leaf values


def _escape_dot_text(s: str) -> str:
    """Escape backslashes and quotes for use inside a DOT label."""
    return s.replace("\\", "\\\\").replace('"', '\\"').replace("\n", " ")


def _dot_label(lines: List[str]) -> str:
    """Quoted DOT label with one entry per line."""
    return '"' + "\\n".join(_escape_dot_text(line) for line in lines) + '"'


def _escape_dot_id(identifier: str) -> str:
    """Escape/quote an identifier for DOT."""
    if identifier and not identifier[0].isdigit() and identifier.replace("_", "").isalnum():
        return identifier
    return '"' + _escape_dot_text(identifier) + '"'


def _segment_label(segment: PathSegment) -> str:
    if isinstance(segment, Member):
        return "{" + repr(segment.value) + "}"
    return f"[{segment!r}]"


def _leaf_label(value: Any) -> str:
    text = repr(value)
    if len(text) > MAX_LEAF_LABEL:
        text = text[:MAX_LEAF_LABEL - 3] + "..."
    return text


def generate_dot(roots: Dict[str, Any], mode: DotMode = DotMode.SIMPLE) -> str:
    """
    Generate Graphviz DOT format for named value graphs.

    Args:
        roots: Name -> value, e.g. {"original": data, "copy": clone}
        mode: Visualization mode (SIMPLE, DETAILED)

    Returns:
        String containing DOT graph definition
    """
    node_ids: Dict[int, str] = {}
    containers: List[Any] = []
    in_degree: Dict[str, int] = {}
    edges: List[Tuple[str, str, str]] = []

    def register(container: Any) -> Tuple[str, bool]:
        ident = id(container)
        if ident in node_ids:
            return node_ids[ident], False
        node_id = f"n{len(node_ids)}"
        node_ids[ident] = node_id
        containers.append(container)
        in_degree[node_id] = 0
        return node_id, True

    def link(source_id: str, target_id: str, label: str) -> None:
        edges.append((source_id, target_id, label))
        in_degree[target_id] += 1

    lines = []

    # Header
    lines.append("digraph values {")
    lines.append("  rankdir=LR;")
    lines.append("  node [shape=box, style=filled, fillcolor=lightblue];")

    # =========================================================================
    # ROOTS
    # =========================================================================

    for name, value in roots.items():
        root_id = _escape_dot_id(f"root_{name}")
        if classify(value) not in CONTAINER_KINDS:
            label = _dot_label([name, _leaf_label(value)])
            lines.append(f"  {root_id} [shape=ellipse, fillcolor=lightgreen, label={label}];")
            continue

        lines.append(f"  {root_id} [shape=ellipse, fillcolor=lightgreen, label={_dot_label([name])}];")
        target_id, is_new = register(value)
        link(root_id, target_id, "")
        stack = [value] if is_new else []

        while stack:
            container = stack.pop()
            parent_id = node_ids[id(container)]
            for segment, child in children(container, classify(container)):
                if classify(child) not in CONTAINER_KINDS:
                    continue
                child_id, is_new = register(child)
                link(parent_id, child_id, _segment_label(segment))
                if is_new:
                    stack.append(child)

    # =========================================================================
    # CONTAINER NODES
    # =========================================================================

    for container in containers:
        node_id = node_ids[id(container)]
        kind = classify(container)
        label = [f"{type(container).__name__} ({kind.value}, {len(container)})"]

        if mode == DotMode.DETAILED:
            for segment, child in children(container, kind):
                if classify(child) not in CONTAINER_KINDS:
                    label.append(f"{_segment_label(segment)} = {_leaf_label(child)}")

        # Reached by more than one reference: aliased
        attrs = [f"label={_dot_label(label)}"]
        if in_degree[node_id] > 1:
            attrs.append("fillcolor=orange")
        lines.append(f"  {node_id} [{', '.join(attrs)}];")

    # =========================================================================
    # EDGES (REFERENCES)
    # =========================================================================

    for source_id, target_id, label in edges:
        edge_attr = f" [label={_dot_label([label])}]" if label else ""
        lines.append(f"  {source_id} -> {target_id}{edge_attr};")

    # Footer
    lines.append("}")

    return "\n".join(lines)


def save_dot_file(roots: Dict[str, Any], filename: str, mode: DotMode = DotMode.SIMPLE) -> None:
    """
    Generate DOT and save to file.

    Args:
        roots: Name -> value graphs to visualize
        filename: Output file path (.dot extension recommended)
        mode: Visualization mode
    """
    dot = generate_dot(roots, mode=mode)
    with open(filename, "w") as f:
        f.write(dot)


__all__ = ["DotMode", "generate_dot", "save_dot_file"]
