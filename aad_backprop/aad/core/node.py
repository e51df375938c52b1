# aad/core/node.py
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

import numpy as np


class OpKind(Enum):
    """Primitive operator kinds. sub/div/neg are compositions, not kinds."""
    ADD = "+"
    MUL = "*"
    POW = "pow"
    TANH = "tanh"
    EXP = "exp"


@dataclass(eq=False)
class GraphNode:
    """
    One vertex of the computation graph.

    Attributes
    ----------
    data    : np.float64
        Forward value, fixed at construction.
    grad    : np.float64
        Accumulated d(root)/d(this node). Starts at 0.0 and only grows
        during a backward pass (`+=`), until an explicit `zero_grad`.
    label   : str
        Free-form debug name. Not unique, no identity semantics.
    op      : Optional[OpKind]
        Operator that produced the node; None for leaves.
    parents : Tuple[GraphNode, ...]
        Operand nodes, left operand first.
    exponent: Optional[float]
        Constant exponent of a POW node; None for every other kind.

    Equality and hashing are identity based (eq=False), so two nodes holding
    the same data and label are still distinct vertices.
    """
    data: np.float64
    grad: np.float64 = field(default_factory=lambda: np.float64(0.0))
    label: str = ""
    op: Optional[OpKind] = None
    parents: Tuple["GraphNode", ...] = ()
    exponent: Optional[float] = None

    @property
    def is_leaf(self) -> bool:
        return self.op is None

    def propagate(self):
        """Push this node's grad into its parents. No-op for leaves."""
        if self.op is None:
            return
        from .engine import BACKWARD_RULES
        BACKWARD_RULES[self.op](self)

    def __repr__(self):
        tag = self.op.value if self.op is not None else None
        return (f"GraphNode(label={self.label!r}, data={float(self.data):.6f}, "
                f"grad={float(self.grad):.6f}, op={tag!r})")
