"""
Value Graph Analyzer: inventory of a value before cloning it.

This module provides lightweight analysis of an arbitrary value:
    - Node counts per kind
    - Nesting depth
    - Shared references and cycles
    - Which deep-copy strategies can reproduce it
    - Warning flags and a recommended strategy

IMPORTANT: Analysis is read-only. It never copies or modifies the value.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from structclone.errors import UnsupportedValueKind
from structclone.options import CloneLimits, Strategy
from structclone.policy import check_cloneable
from structclone.values import CONTAINER_KINDS, FOREIGN_KINDS, ValueKind, classify, format_path, is_mutable_container
from structclone.walker import walk

# Nesting beyond this is worth bounding with CloneLimits
DEEP_NESTING_THRESHOLD = 100


@dataclass
class GraphReport:
    """Analysis report for one value graph."""

    root_kind: ValueKind
    total_nodes: int = 0
    container_count: int = 0
    primitive_count: int = 0
    foreign_count: int = 0
    kind_counts: Dict[str, int] = field(default_factory=dict)
    max_depth: int = 0

    # Identity structure
    shared_references: int = 0
    has_cycles: bool = False
    cycle_example: Optional[str] = None

    # Strategy support
    supported_strategies: List[Strategy] = field(default_factory=list)
    rejections: Dict[str, str] = field(default_factory=dict)
    recommended_strategy: Strategy = Strategy.RECURSIVE_CLONE

    # Warnings and flags
    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)

    def supports(self, strategy: Strategy) -> bool:
        return strategy in self.supported_strategies


def analyze_value(source: Any, limits: Optional[CloneLimits] = None) -> GraphReport:
    """
    Perform a full analysis of a value graph.

    Checks for:
    - Sizes and nesting depth
    - Shared sub-containers and cycles
    - Per-strategy support (with the first rejection for each)

    Returns a GraphReport with metrics, warnings and a recommendation.
    """
    report = GraphReport(root_kind=classify(source))
    kind_counts: Dict[str, int] = defaultdict(int)

    # =========================================================================
    # 1. INVENTORY
    # =========================================================================

    for node in walk(source, limits=limits):
        report.total_nodes += 1
        report.max_depth = max(report.max_depth, node.depth)
        kind_counts[node.kind.value] += 1

        if node.kind is ValueKind.PRIMITIVE:
            report.primitive_count += 1
        elif node.kind in FOREIGN_KINDS:
            report.foreign_count += 1

        if node.kind not in CONTAINER_KINDS:
            continue
        if node.cycle:
            if not report.has_cycles:
                report.has_cycles = True
                report.cycle_example = format_path(node.path)
        elif node.shared:
            if is_mutable_container(node.value):
                report.shared_references += 1
        else:
            report.container_count += 1

    report.kind_counts = dict(kind_counts)

    # =========================================================================
    # 2. STRATEGY SUPPORT
    # =========================================================================

    for strategy in Strategy:
        try:
            check_cloneable(source, strategy)
        except UnsupportedValueKind as e:
            report.rejections[strategy.value] = str(e)
        else:
            report.supported_strategies.append(strategy)

    if report.supports(Strategy.JSON_ROUND_TRIP) and report.shared_references == 0:
        report.recommended_strategy = Strategy.JSON_ROUND_TRIP
    elif report.supports(Strategy.STRUCTURAL_CLONE):
        report.recommended_strategy = Strategy.STRUCTURAL_CLONE
    else:
        report.recommended_strategy = Strategy.RECURSIVE_CLONE

    # =========================================================================
    # 3. WARNING FLAGS
    # =========================================================================

    if report.has_cycles:
        report.add_warning(
            f"Cycle detected at {report.cycle_example}: JSON round-trip cannot reproduce it"
        )

    if report.shared_references:
        report.add_warning(
            f"Shared references: {report.shared_references} container(s) reached by more than one path"
        )

    if report.foreign_count:
        report.add_warning(
            f"Foreign values: {report.foreign_count} value(s) a recursive clone keeps by reference"
        )

    if report.max_depth > DEEP_NESTING_THRESHOLD:
        report.add_warning(
            f"Deep nesting: max depth {report.max_depth}, consider CloneLimits for untrusted input"
        )

    return report
