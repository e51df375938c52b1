# aad/core/engine.py
from __future__ import annotations
import numpy as np
from typing import Callable, Dict, List, Union
from .node import GraphNode, OpKind
from .var import Value

Root = Union[Value, GraphNode]


def _node_of(root: Root) -> GraphNode:
    return root.node if isinstance(root, Value) else root


def topological_sort(root: Root) -> List[GraphNode]:
    """
    All nodes reachable from `root` through `parents`, each parent placed
    before every node that consumes it (DFS post-order).

    Visited bookkeeping is by node identity, so a node reached along several
    paths is emitted once. The walk uses an explicit stack instead of
    recursion; graphs from long training loops are deeper than the
    interpreter's recursion limit.
    """
    topo: List[GraphNode] = []
    visited = set()
    stack = [(_node_of(root), False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            topo.append(node)
            continue
        if id(node) in visited:
            continue
        visited.add(id(node))
        stack.append((node, True))
        # reversed so the left operand is explored first
        for p in reversed(node.parents):
            if id(p) not in visited:
                stack.append((p, False))
    return topo


# ---------------- backward rules, dispatched by OpKind ---------------- #
# Each rule reads the node's own data/grad and its parents' data at call
# time, and adds into the parents' grad.

def _add_backward(out: GraphNode):
    a, b = out.parents
    a.grad += out.grad
    b.grad += out.grad


def _mul_backward(out: GraphNode):
    a, b = out.parents
    a.grad += b.data * out.grad
    b.grad += a.data * out.grad


def _pow_backward(out: GraphNode):
    (a,) = out.parents
    k = out.exponent
    a.grad += k * (a.data ** (k - 1.0)) * out.grad


def _tanh_backward(out: GraphNode):
    (a,) = out.parents
    a.grad += (1.0 - out.data ** 2) * out.grad


def _exp_backward(out: GraphNode):
    (a,) = out.parents
    a.grad += out.data * out.grad


BACKWARD_RULES: Dict[OpKind, Callable[[GraphNode], None]] = {
    OpKind.ADD: _add_backward,
    OpKind.MUL: _mul_backward,
    OpKind.POW: _pow_backward,
    OpKind.TANH: _tanh_backward,
    OpKind.EXP: _exp_backward,
}


def differentiate(root: Root):
    """
    Run a single reverse pass from `root`.

    After the call every ancestor's `grad` holds d(root)/d(node).

    Notes:
        - The root is seeded with grad = 1.0; every other node accumulates
          with `+=`. Nothing is reset here: differentiating a graph again
          without `zero_grad(root)` in between mixes stale gradients into
          the new ones.
        - Leaves are skipped; they only receive contributions.
    """
    topo = topological_sort(root)
    _node_of(root).grad = np.float64(1.0)

    for node in reversed(topo):
        node.propagate()


def zero_grad(root: Root):
    """Set grad to 0.0 on every node reachable from `root`."""
    for node in topological_sort(root):
        node.grad = np.float64(0.0)
