"""
Computation graph utilities.

Printing and statistics for the graph hanging off a root Value.
"""

import numpy as np
from typing import Dict, List
from collections import Counter

from .engine import topological_sort


def _op_name(node) -> str:
    return node.op.value if node.op is not None else "leaf"


def format_graph(root, indent: int = 0) -> str:
    """
    Indented tree view of `root` and its ancestors, parents 4 spaces deeper.

    A node reached along several paths is printed once per path, so the
    output grows with the number of paths, not nodes: n rounds of
    `x = x + x` print 2**(n+1) - 1 lines. Meant for small expression trees; use
    print_computation_graph for anything larger.
    """
    node = getattr(root, "node", root)
    lines: List[str] = []

    def walk(n, depth):
        name = n.label if n.label else "GraphNode"
        op = n.op.value if n.op is not None else None
        lines.append(f"{' ' * depth}{name} (data={float(n.data):.6f}, "
                     f"grad={float(n.grad):.6f}, op={op})")
        for p in n.parents:
            walk(p, depth + 4)

    walk(node, indent)
    return "\n".join(lines)


def get_graph_stats(root) -> Dict:
    """
    Statistics of the graph reachable from `root` (no printing).

    Returns
    -------
    dict with node/edge counts, fan-in/fan-out and the operator breakdown
    """
    nodes = topological_sort(root)
    n_nodes = len(nodes)
    n_edges = sum(len(n.parents) for n in nodes)

    fan_ins = [len(n.parents) for n in nodes]
    position = {id(n): i for i, n in enumerate(nodes)}
    fan_outs = [0] * n_nodes
    for n in nodes:
        for p in n.parents:
            fan_outs[position[id(p)]] += 1

    op_counter = Counter(_op_name(n) for n in nodes)

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'leaves': op_counter.get("leaf", 0),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter)
    }


def print_graph_summary(root, detailed: bool = False) -> Dict:
    """
    Print a summary of the graph reachable from `root`.

    Args:
        root: Value or GraphNode
        detailed: also list every node (only for graphs up to 100 nodes)

    Returns:
        The statistics dict from get_graph_stats
    """
    stats = get_graph_stats(root)
    n_nodes = stats['nodes']

    print("\n" + "="*70)
    print("COMPUTATION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {n_nodes:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / n_nodes
        print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and n_nodes <= 100:
        print()
        print("="*70)
        print("DETAILED NODE LIST")
        print("="*70)
        print_computation_graph(root, max_nodes=100)

    print("="*70 + "\n")
    return stats


def print_computation_graph(root, max_nodes: int = 20) -> None:
    """
    Flat listing of the graph in topological order (parents first).

    Args:
        root: Value or GraphNode
        max_nodes: how many nodes to print at most
    """
    nodes = topological_sort(root)
    position = {id(n): i for i, n in enumerate(nodes)}

    for i, node in enumerate(nodes[:max_nodes]):
        label = node.label or "-"
        if node.parents:
            parent_info = ", ".join(f"Node{position[id(p)]}" for p in node.parents)
            print(f"Node {i:4d}: {_op_name(node):6s} {label:10s} "
                  f"({float(node.data):10.6f}, grad={float(node.grad):10.6f}) <- [{parent_info}]")
        else:
            print(f"Node {i:4d}: {'leaf':6s} {label:10s} "
                  f"({float(node.data):10.6f}, grad={float(node.grad):10.6f}) [leaf/input]")

    if len(nodes) > max_nodes:
        print(f"... ({len(nodes) - max_nodes} more nodes)")
