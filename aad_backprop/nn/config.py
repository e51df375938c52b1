"""
Training configuration for the MLP demo.
"""

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass
class TrainConfig:
    """
    Hyperparameters of `train`.

    Attributes
    ----------
    learning_rate : float
        SGD step size.
    epochs : int
        Number of full passes over the dataset.
    hidden : Tuple[int, ...]
        Hidden layer sizes; the output layer (size 1) is appended by the demo.
    seed : Optional[int]
        Seed for weight initialization; None draws fresh entropy.
    verbose : bool
        Print the loss while training.
    print_every : int
        Print every n-th epoch when verbose.
    """
    learning_rate: float = 0.05
    epochs: int = 20
    hidden: Tuple[int, ...] = (4, 4)
    seed: Optional[int] = None
    verbose: bool = True
    print_every: int = 1

    def __post_init__(self):
        if self.learning_rate <= 0:
            raise ValueError(f"learning_rate must be positive, got {self.learning_rate}")
        if self.epochs < 0:
            raise ValueError(f"epochs must be non-negative, got {self.epochs}")
        if self.print_every < 1:
            raise ValueError(f"print_every must be >= 1, got {self.print_every}")
        self.hidden = tuple(int(h) for h in self.hidden)
        if any(h < 1 for h in self.hidden):
            raise ValueError(f"hidden layer sizes must be >= 1, got {self.hidden}")
