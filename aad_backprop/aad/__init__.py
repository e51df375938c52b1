# aad/__init__.py
# Scalar reverse-mode automatic differentiation

from .core.node import GraphNode, OpKind
from .core.var import Value
from .core.engine import (
    differentiate,
    topological_sort,
    zero_grad,
)
from .core.seeds import grad, grads, grads_list, value

# Module-level operator functions (add, mul, tanh, ...)
from . import ops
from .core import graph_utils
from .core.graph_utils import format_graph, get_graph_stats

__all__ = [
    # Core
    'GraphNode',
    'OpKind',
    'Value',
    # Engine
    'differentiate',
    'topological_sort',
    'zero_grad',
    # Helpers
    'grad',
    'grads',
    'grads_list',
    'value',
    # Diagnostics
    'graph_utils',
    'format_graph',
    'get_graph_stats',
]
