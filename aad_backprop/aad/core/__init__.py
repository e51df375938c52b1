# aad/core/__init__.py

"""
Core public API of the scalar AD engine.

Exports:
    GraphNode        : One vertex of the computation graph.
    OpKind           : Closed set of primitive operator kinds.
    Value            : Shared handle over a GraphNode; all operators live here.
    differentiate    : Reverse pass populating grad on every ancestor.
    topological_sort : Ancestors of a root, parents before consumers.
    zero_grad        : Reset grad on every node reachable from a root.
    grad, grads, grads_list : Derivatives of plain Python functions.
    value            : Numeric value of a Value (numbers pass through).
"""

from .node import GraphNode, OpKind
from .var import Value
from .engine import differentiate, topological_sort, zero_grad
from .seeds import grad, grads, grads_list, value

__all__ = [
    "GraphNode", "OpKind",
    "Value",
    "differentiate", "topological_sort", "zero_grad",
    "grad", "grads", "grads_list", "value",
]
