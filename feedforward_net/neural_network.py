import logging

import numpy as np

from feedforward_net.config import DEFAULT_INPUT, DEFAULT_SIZES, NetworkConfig
from feedforward_net.errors import (
    DimensionMismatch,
    InputRangeError,
    InputShapeMismatch,
    InvalidTopology,
)
from feedforward_net.linalg import Matrix, Vector
from feedforward_net.logging_config import setup_logging

logger = logging.getLogger(__name__)


def _check_sizes(sizes):
    sizes = tuple(sizes)
    if len(sizes) < 1:
        raise InvalidTopology("a network needs at least one layer")
    for index, size in enumerate(sizes):
        if isinstance(size, bool) or not isinstance(size, (int, np.integer)) or size <= 0:
            raise InvalidTopology(
                "layer {0} has width {1!r}, widths must be positive integers".format(index, size)
            )
    return tuple(int(size) for size in sizes)


class Network(object):
    """
    Dense feedforward network with sigmoid activations.

    weights[i] is a sizes[i+1] x sizes[i] Matrix and biases[i] a sizes[i+1]
    Vector, both drawn uniformly from [0, 1) once at construction. activations[i]
    holds the output of layer i after the last feedForward call and is
    overwritten by the next one.
    """

    def __init__(self, sizes, rng=None):
        self.sizes = _check_sizes(sizes)
        self.num_layers = len(self.sizes)

        self.weights = []
        for x, y in zip(self.sizes[:-1], self.sizes[1:]):
            w = Matrix(y, x)
            w.randomize(rng)
            self.weights.append(w)

        self.biases = []
        for y in self.sizes[1:]:
            b = Vector(y)
            b.randomize(rng)
            self.biases.append(b)

        self.activations = [Vector(size) for size in self.sizes]
        logger.info("Network initialised with sizes %s", list(self.sizes))

    @classmethod
    def from_config(cls, sizes, config):
        return cls(sizes, rng=config.make_rng())

    @classmethod
    def from_parameters(cls, weights, biases):
        """
        Network with fixed, caller-supplied weights and biases (copied).

        The topology is read from the weight matrices; every matrix has to
        chain onto the previous one and every bias has to match its layer.
        """
        if len(weights) == 0 or len(weights) != len(biases):
            raise InvalidTopology(
                "need one bias per weight matrix and at least one of each, "
                "got {0} weights and {1} biases".format(len(weights), len(biases))
            )
        sizes = [weights[0].columns]
        for index, (w, b) in enumerate(zip(weights, biases)):
            if w.columns != sizes[-1]:
                raise DimensionMismatch(
                    "weights[{0}] has {1} columns, previous layer has width {2}".format(
                        index, w.columns, sizes[-1])
                )
            if b.rows != w.rows:
                raise DimensionMismatch(
                    "biases[{0}] has {1} rows, weights[{0}] has {2}".format(index, b.rows, w.rows)
                )
            sizes.append(w.rows)

        # skip the random draw, parameters are replaced right away
        net = cls.__new__(cls)
        net.sizes = _check_sizes(sizes)
        net.num_layers = len(net.sizes)
        net.weights = [w.copy() for w in weights]
        net.biases = [b.copy() for b in biases]
        net.activations = [Vector(size) for size in net.sizes]
        logger.info("Network loaded with sizes %s", list(net.sizes))
        return net

    def feedForward(self, a):
        """Run one forward pass and return the output layer's activations."""
        a = list(a)
        if len(a) != self.sizes[0]:
            raise InputShapeMismatch(
                "input has {0} values, input layer has width {1}".format(len(a), self.sizes[0])
            )
        outside = [v for v in a if not 0.0 <= v <= 1.0]
        if outside:
            raise InputRangeError("input values must lie in [0, 1], got {0}".format(outside))

        self.activations[0] = Vector(self.sizes[0], a)
        logger.debug("Set input data")

        for layer, (w, b) in enumerate(zip(self.weights, self.biases)):
            logger.debug("Starting to compute layer %d", layer + 1)
            logger.debug("Weights: %s", w)
            logger.debug("Layer: %s", self.activations[layer])

            z = w @ self.activations[layer] + b  # Similar to perceptron output
            z.apply_sigmoid()  # Output compression between 0-1
            self.activations[layer + 1] = z

        return self.activations[-1].tolist()


def main(config=None):
    config = config if config is not None else NetworkConfig.from_env()
    setup_logging(config.log_level)
    net = Network.from_config(DEFAULT_SIZES, config)
    result = net.feedForward(DEFAULT_INPUT)
    print("Result:\n{0}".format(result))


if __name__ == '__main__':
    main()
