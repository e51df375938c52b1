"""
Neural-network layer on top of the scalar engine.

Provides:
1. Neuron / Layer / MLP: tanh units with uniformly initialized weights
2. mse_loss and SGD: loss and gradient-descent step
3. TrainConfig and train: the training loop
"""

from .modules import Module, Neuron, Layer, MLP
from .optim import SGD, mse_loss
from .config import TrainConfig
from .train import train, predict

__all__ = [
    'Module',
    'Neuron',
    'Layer',
    'MLP',
    'SGD',
    'mse_loss',
    'TrainConfig',
    'train',
    'predict',
]
