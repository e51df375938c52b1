# aad/core/var.py
from __future__ import annotations
import numbers
import numpy as np
from typing import Any, List, Optional

from .node import GraphNode, OpKind


def _as_float64(val: Any) -> np.float64:
    # bool is a numbers.Number too; a truth value is never a graph input
    if isinstance(val, bool) or not isinstance(val, numbers.Real):
        raise TypeError(
            f"Value only accepts real scalars (int, float, numpy floating), "
            f"but got {type(val)}"
        )
    return np.float64(val)


class Value:
    """
    Handle over one GraphNode of the computation graph.

    Several Values may alias the same node: reusing a Value in more than one
    expression never copies its node, so every use adds its gradient
    contribution into the same `grad`.

    Attributes
    ----------
    node  : GraphNode
        The shared vertex this handle points at.
    data  : np.float64 (read-only)
        Forward value of the node.
    grad  : np.float64 (read-only)
        Gradient accumulated by the last backward pass(es).
    label : str
        Debug name, stored on the node (assigning relabels every alias).
    """

    __slots__ = ("_node",)

    def __init__(self, val: Any, label: str = ""):
        if isinstance(val, Value):
            # alias, not copy; a non-empty label relabels the shared node
            self._node = val._node
            if label:
                self._node.label = label
            return
        self._node = GraphNode(data=_as_float64(val), label=label)

    @classmethod
    def _from_node(cls, node: GraphNode) -> Value:
        v = cls.__new__(cls)
        v._node = node
        return v

    @classmethod
    def _derived(cls, data, op: OpKind, parents, exponent: Optional[float] = None) -> Value:
        """Build the result Value of a primitive operator."""
        node = GraphNode(
            data=np.float64(data),
            label=op.value,
            op=op,
            parents=tuple(p._node for p in parents),
            exponent=exponent,
        )
        return cls._from_node(node)

    # ---------------------------- accessors ---------------------------- #
    @property
    def node(self) -> GraphNode:
        return self._node

    @property
    def data(self) -> np.float64:
        return self._node.data

    @property
    def grad(self) -> np.float64:
        return self._node.grad

    @property
    def label(self) -> str:
        return self._node.label

    @label.setter
    def label(self, label: str):
        self._node.label = label

    @property
    def op(self) -> Optional[OpKind]:
        return self._node.op

    @property
    def parents(self) -> List[Value]:
        return [Value._from_node(p) for p in self._node.parents]

    @property
    def is_leaf(self) -> bool:
        return self._node.is_leaf

    def relabel(self, label: str) -> Value:
        """Overwrite the label of the underlying node; visible through all aliases."""
        self._node.label = label
        return self

    def clone(self) -> Value:
        """Return another handle on the same node."""
        return Value._from_node(self._node)

    def set_data(self, val: Any):
        """
        Move a leaf to a new value (used by optimizers between steps).

        Derived nodes keep the value they were computed with; rebuild the
        forward pass instead.
        """
        if not self._node.is_leaf:
            raise ValueError("set_data is only allowed on leaf Values; "
                             f"this node was produced by {self._node.op.value!r}")
        self._node.data = _as_float64(val)

    def __repr__(self):
        op = self._node.op.value if self._node.op is not None else None
        return (f"Value(data={float(self.data):.6f}, grad={float(self.grad):.6f}, "
                f"label={self.label!r}, op={op!r})")

    # --------------------------- differentiation --------------------------- #
    def backward(self):
        """
        Populate `grad` on every ancestor of this Value.

        Gradients accumulate: call `zero_grad()` before differentiating the
        same graph again.
        """
        from .engine import differentiate
        differentiate(self)

    def zero_grad(self):
        from .engine import zero_grad
        zero_grad(self)

    # ---------------------- operator overloading ---------------------- #
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, other):
        from ..ops.arithmetic import pow
        return pow(self, other)

    def tanh(self):
        from ..ops.transcendental import tanh
        return tanh(self)

    def exp(self):
        from ..ops.transcendental import exp
        return exp(self)
