"""
Loss and gradient-descent step for the scalar models.
"""

from typing import List, Sequence

from ..aad.core.var import Value
from ..aad.core.engine import zero_grad


def mse_loss(preds: Sequence[Value], targets: Sequence) -> Value:
    """Sum of squared errors, sum_i (yp_i - yt_i)**2."""
    if len(preds) != len(targets):
        raise ValueError(f"got {len(preds)} predictions for {len(targets)} targets")
    loss = Value(0.0)
    for yp, yt in zip(preds, targets):
        loss = loss + (yp - yt) ** 2
    return loss.relabel("loss")


class SGD:
    """
    Plain gradient descent: p.data -= lr * p.grad

    Attributes:
        params (List[Value]): leaf Values to update
        lr (float): learning rate
    """

    def __init__(self, params: Sequence[Value], lr: float = 0.05):
        self.params: List[Value] = list(params)
        self.lr = lr

    def zero_grad(self):
        for p in self.params:
            zero_grad(p)

    def step(self):
        for p in self.params:
            p.set_data(p.data - self.lr * p.grad)

    def __repr__(self):
        return f"SGD(n_params={len(self.params)}, lr={self.lr})"
