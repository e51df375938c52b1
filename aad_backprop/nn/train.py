"""
Gradient-descent training loop for the scalar MLP.

Each epoch builds a fresh forward graph from the current parameter leaves,
so the graph of the previous epoch is dropped as soon as its loss Value goes
out of scope. Parameter gradients are reset before every backward pass.
"""

import time
import warnings
import numpy as np
from typing import List, Optional, Sequence

from ..aad.core.engine import differentiate
from .config import TrainConfig
from .modules import Module
from .optim import SGD, mse_loss

# The four-sample toy dataset the demo trains on
TOY_XS = [
    [2.0, 3.0, -1.0],
    [3.0, -1.0, 0.5],
    [0.5, 1.0, 1.0],
    [1.0, 1.0, -1.0],
]
TOY_YS = [1.0, -1.0, -1.0, 1.0]


def predict(model: Module, xs: Sequence[Sequence[float]]):
    """Scalar prediction per sample (first output of the model)."""
    return [model(x)[0] for x in xs]


def train(model: Module, xs: Sequence[Sequence[float]], ys: Sequence[float],
          config: Optional[TrainConfig] = None) -> List[float]:
    """
    Fit `model` to (xs, ys) with SGD on the summed squared error.

    Args:
        model: any Module whose call returns a list of Values
        xs: input samples
        ys: scalar targets
        config: hyperparameters (TrainConfig() if omitted)

    Returns:
        Loss of every completed epoch, measured before that epoch's update.
    """
    config = config or TrainConfig()
    optimizer = SGD(model.parameters(), lr=config.learning_rate)
    history: List[float] = []
    t0 = time.time()

    for epoch in range(config.epochs):
        loss = mse_loss(predict(model, xs), ys)
        loss_val = float(loss.data)
        if not np.isfinite(loss_val):
            warnings.warn(
                f"Non-finite loss {loss_val} at epoch {epoch}; stopping early.",
                RuntimeWarning,
            )
            break

        optimizer.zero_grad()
        differentiate(loss)
        optimizer.step()
        history.append(loss_val)

        if config.verbose and epoch % config.print_every == 0:
            print(f"Epoch {epoch + 1:4d}: loss={loss_val:.6f}")

    if config.verbose:
        print(f"Trained {len(history)} epochs in {time.time() - t0:.2f} s")
    return history
