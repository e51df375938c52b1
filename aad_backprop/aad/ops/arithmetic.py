# aad/ops/arithmetic.py
import numbers
from ..core.var import Value
from ..core.node import OpKind


def _as_value(x):
    """Ensure x is a Value; otherwise wrap it as an unlabelled constant leaf."""
    return x if isinstance(x, Value) else Value(x)


def _binary(x, y, f, op):
    """
    Generic binary primitive:
      - computes out.data = f(x.data, y.data)
      - records (x, y) as parents, left operand first
    """
    x = _as_value(x)
    y = _as_value(y)
    return Value._derived(f(x.data, y.data), op, (x, y))


def add(x, y): return _binary(x, y, lambda a, b: a + b, OpKind.ADD)
def mul(x, y): return _binary(x, y, lambda a, b: a * b, OpKind.MUL)


def pow(x, k):
    """
    Power with a constant exponent:
      out.data = x.data ** k

    The exponent is not a graph node; a Value exponent is rejected.
    """
    if isinstance(k, bool) or not isinstance(k, numbers.Real):
        raise TypeError(f"only supporting int/float powers, got {type(k)}")
    x = _as_value(x)
    k = float(k)
    return Value._derived(x.data ** k, OpKind.POW, (x,), exponent=k)


def neg(x):
    return mul(x, -1.0)


def sub(x, y):
    """x - y, expanded as x + (y * -1)."""
    return add(x, mul(y, -1.0))


def div(x, y):
    """
    x / y, expanded as x * y**-1.

    Dividing by zero aborts before any node is created.
    """
    y = _as_value(y)
    if y.data == 0.0:
        raise ZeroDivisionError("Divide by zero")
    return mul(x, pow(y, -1))
