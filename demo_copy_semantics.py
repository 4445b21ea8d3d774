#!/usr/bin/env python3
"""
Demo: Shallow vs. deep copies of nested lists.

Walks through the documented scenarios, prints an analysis report for a
mixed record and writes DOT diagrams of an original next to its copies.
"""

from structclone.analyzer import analyze_value
from structclone.backends import DotMode, save_dot_file
from structclone.cloner import deep_copy, shallow_copy
from structclone.errors import UnsupportedValueKind
from structclone.examples import build_matrix, build_nested_list, build_profile, build_self_referencing_list
from structclone.options import Strategy


def print_report(report):
    """Pretty-print a GraphReport."""
    print()
    print("=" * 70)
    print(f"VALUE ANALYSIS REPORT: {report.root_kind.value}")
    print("=" * 70)
    print(f"  Total Nodes:           {report.total_nodes}")
    print(f"  Containers:            {report.container_count}")
    print(f"  Max Depth:             {report.max_depth}")
    print(f"  Shared References:     {report.shared_references}")
    print(f"  Has Cycles:            {'YES' if report.has_cycles else 'NO'}")
    print(f"  Kinds:                 {report.kind_counts}")
    print()
    print("  Supported Strategies:")
    for strategy in Strategy:
        mark = "yes" if report.supports(strategy) else "no "
        print(f"    [{mark}] {strategy.value:<11} {strategy.description}")
    for name, message in report.rejections.items():
        print(f"    {name}: {message}")
    print(f"  Recommended:           {report.recommended_strategy.value}")
    print()
    if report.warnings:
        print("⚠️  WARNINGS")
        for i, warning in enumerate(report.warnings, 1):
            print(f"  {i}. {warning}")
    else:
        print("✨ NO WARNINGS")
    print()


def main():
    print("=" * 70)
    print("SHALLOW COPY")
    print("=" * 70)
    matrix = build_matrix()
    copy = shallow_copy(matrix)
    copy[1][0] = 44
    print(f"  copy[1][0] = 44  ->  original: {matrix}")

    print()
    print("=" * 70)
    print("DEEP COPY")
    print("=" * 70)
    for strategy in Strategy:
        data = build_nested_list()
        clone = deep_copy(data, strategy)
        clone[4][0] = 55
        print(f"  {strategy.value:<11} copy[4][0] = 55  ->  original: {data}")

    cyclic = build_self_referencing_list()
    clone = deep_copy(cyclic)
    print(f"  recursive   cycle preserved: {clone[2] is clone}")
    try:
        deep_copy(cyclic, Strategy.JSON_ROUND_TRIP)
    except UnsupportedValueKind as e:
        print(f"  json        {e}")

    print_report(analyze_value(build_profile(include_callable=True)))

    matrix = build_matrix()
    roots = {
        "original": matrix,
        "shallow": shallow_copy(matrix),
        "deep": deep_copy(matrix),
    }
    for mode in DotMode:
        filename = f"copies_{mode.value}.dot"
        save_dot_file(roots, filename, mode=mode)
        print(f"✅ Diagram saved to {filename}")


if __name__ == "__main__":
    main()
