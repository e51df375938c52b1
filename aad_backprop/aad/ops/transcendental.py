# aad/ops/transcendental.py
import numpy as np
from ..core.var import Value
from ..core.node import OpKind
from .arithmetic import _as_value


def tanh(x):
    x = _as_value(x)
    return Value._derived(np.tanh(x.data), OpKind.TANH, (x,))


def exp(x):
    x = _as_value(x)
    return Value._derived(np.exp(x.data), OpKind.EXP, (x,))
