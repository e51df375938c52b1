# aad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph. Inputs that are already Values keep their
# node, so every helper clears the graph with zero_grad() before the reverse
# pass; no gradient from an earlier pass can leak in.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List

from .var import Value
from .engine import differentiate, zero_grad


def value(x: Any) -> Any:
    """Return the numeric value of a Value; pass through plain numbers unchanged."""
    return float(x.data) if isinstance(x, Value) else x


def _ensure_ad(v: Any, *, name: str) -> Value:
    """Wrap a plain number as a named leaf; a Value is used as is (label untouched)."""
    return v if isinstance(v, Value) else Value(v, label=name)


def _clear(y: Value, inputs: Iterable[Value]):
    # inputs need their own reset when f does not depend on them
    zero_grad(y)
    for x in inputs:
        zero_grad(x)


def _ensure_output(y: Any) -> Value:
    # a function that ignores its inputs returns a plain number: constant output
    return y if isinstance(y, Value) else Value(y, label="y")


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Value], Value], x0: float) -> float:
    """
    Derivative of a scalar function y=f(x) at x0.

    Example
    -------
    grad(lambda x: x * x, 3.0) -> 6.0
    """
    x = _ensure_ad(x0, name="x")
    y = _ensure_output(f(x))
    _clear(y, [x])
    differentiate(y)
    return float(x.grad)


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Value]], Value],
          inputs: Dict[str, float]) -> Dict[str, float]:
    """
    Gradient of y=f(vars) w.r.t. ALL inputs (dict form), from ONE reverse pass.

    Parameters
    ----------
    f       : function taking a dict {name: Value} and returning a Value
    inputs  : dict {name: number}

    Returns
    -------
    dict {name: float}  # same key order as `inputs`
    """
    vars_ad: Dict[str, Value] = {k: _ensure_ad(v, name=k) for k, v in inputs.items()}
    y = _ensure_output(f(vars_ad))
    _clear(y, vars_ad.values())
    differentiate(y)
    return {k: float(vars_ad[k].grad) for k in inputs.keys()}


def grads_list(f: Callable[[List[Value]], Value],
               x0_list: Iterable[float]) -> List[float]:
    """
    Same as grads(), with positional inputs.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    xs: List[Value] = [_ensure_ad(v, name=f"x{i}") for i, v in enumerate(x0_list)]
    y = _ensure_output(f(xs))
    _clear(y, xs)
    differentiate(y)
    return [float(x.grad) for x in xs]
