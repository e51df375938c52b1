# aad/ops/__init__.py

from . import arithmetic
from . import transcendental

# Convenience re-exports so users can do: from aad_backprop.aad.ops import mul, tanh, ...
from .arithmetic import add, sub, mul, div, neg, pow
from .transcendental import tanh, exp

__all__ = [
    "add", "sub", "mul", "div", "neg", "pow",
    "tanh", "exp",
]
