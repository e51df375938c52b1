"""
Train the 3-4-4-1 tanh MLP on the toy dataset and print the loss.

    python -m aad_backprop.nn.demo --epochs 50 --lr 0.05
"""

import argparse
import numpy as np

from .config import TrainConfig
from .modules import MLP
from .train import TOY_XS, TOY_YS, predict, train


def parse_hidden(hidden_str):
    """Parse '4,4' into (4, 4)."""
    return tuple(int(h) for h in hidden_str.split(',') if h.strip())


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='Scalar autodiff MLP demo',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--epochs', type=int, default=20,
                        help='number of training epochs')
    parser.add_argument('--lr', type=float, default=0.05,
                        help='SGD learning rate')
    parser.add_argument('--hidden', type=str, default='4,4',
                        help='comma-separated hidden layer sizes')
    parser.add_argument('--seed', type=int, default=None,
                        help='seed for weight initialization')
    parser.add_argument('--print-every', type=int, default=1,
                        help='print the loss every n epochs')
    parser.add_argument('--quiet', action='store_true',
                        help='only print the final predictions')
    return parser.parse_args(argv)


def main(argv=None):
    """Entry point of the aad-backprop-demo command."""
    args = parse_args(argv)
    config = TrainConfig(
        learning_rate=args.lr,
        epochs=args.epochs,
        hidden=parse_hidden(args.hidden),
        seed=args.seed,
        verbose=not args.quiet,
        print_every=args.print_every,
    )

    rng = np.random.default_rng(config.seed)
    model = MLP(len(TOY_XS[0]), list(config.hidden) + [1], rng=rng)
    if config.verbose:
        print(model)
        print(f"{len(model.parameters())} parameters")

    history = train(model, TOY_XS, TOY_YS, config)

    print("Predictions:")
    for x, y, yp in zip(TOY_XS, TOY_YS, predict(model, TOY_XS)):
        print(f"  {x} -> {float(yp.data):+.4f} (target {y:+.1f})")
    if history:
        print(f"Final loss: {history[-1]:.6f}")


if __name__ == "__main__":
    main()
