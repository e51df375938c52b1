"""
Neuron / Layer / MLP built on the scalar engine.

The engine only builds graphs and differentiates them; these classes own
parameter initialization and the wiring of weighted sums through tanh.
"""

import numpy as np
from typing import List, Optional, Sequence

from ..aad.core.var import Value
from ..aad.core.engine import zero_grad


class Module:
    """Parameter bookkeeping shared by every model class."""

    def parameters(self) -> List[Value]:
        return []

    def zero_grad(self):
        for p in self.parameters():
            zero_grad(p)


class Neuron(Module):
    """
    tanh(b + sum_i w_i * x_i)

    Args:
        nin: number of inputs
        rng: numpy Generator used for the weights (a fresh one if omitted)
    """

    def __init__(self, nin: int, rng: Optional[np.random.Generator] = None):
        rng = rng if rng is not None else np.random.default_rng()
        self.w = [Value(rng.uniform(-1.0, 1.0), label="w") for _ in range(nin)]
        self.b = Value(0.0, label="b")

    def __call__(self, xs: Sequence) -> Value:
        if len(xs) != len(self.w):
            raise ValueError(f"mismatch between input dim {len(xs)} and weight dim {len(self.w)}")
        act = self.b
        for wi, xi in zip(self.w, xs):
            act = act + wi * xi
        return act.tanh()

    def parameters(self) -> List[Value]:
        return [self.b] + self.w

    def __repr__(self):
        return f"Neuron({len(self.w)})"


class Layer(Module):
    def __init__(self, nin: int, nout: int, rng: Optional[np.random.Generator] = None):
        self.neurons = [Neuron(nin, rng=rng) for _ in range(nout)]

    def __call__(self, xs: Sequence) -> List[Value]:
        return [n(xs) for n in self.neurons]

    def parameters(self) -> List[Value]:
        return [p for n in self.neurons for p in n.parameters()]

    def __repr__(self):
        return f"Layer of [{', '.join(str(n) for n in self.neurons)}]"


class MLP(Module):
    """
    Stack of tanh layers sized [nin] + nouts.

    Example
    -------
    MLP(3, [4, 4, 1])([2.0, 3.0, -1.0]) -> [Value(...)]
    """

    def __init__(self, nin: int, nouts: Sequence[int], rng: Optional[np.random.Generator] = None):
        sizes = [nin] + list(nouts)
        self.layers = [Layer(sizes[i], sizes[i + 1], rng=rng) for i in range(len(nouts))]

    def __call__(self, xs: Sequence) -> List[Value]:
        for layer in self.layers:
            xs = layer(xs)
        return xs

    def parameters(self) -> List[Value]:
        return [p for layer in self.layers for p in layer.parameters()]

    def __repr__(self):
        return f"MLP of [{', '.join(str(layer) for layer in self.layers)}]"
