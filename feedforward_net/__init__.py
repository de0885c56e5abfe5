from feedforward_net.activation import sigmoid
from feedforward_net.config import NetworkConfig
from feedforward_net.errors import (
    DimensionMismatch,
    IndexOutOfRange,
    InputRangeError,
    InputShapeMismatch,
    InvalidTopology,
    NetworkError,
)
from feedforward_net.linalg import Matrix, Vector, add, equals, multiply
from feedforward_net.neural_network import Network

__all__ = [
    "DimensionMismatch",
    "IndexOutOfRange",
    "InputRangeError",
    "InputShapeMismatch",
    "InvalidTopology",
    "Matrix",
    "Network",
    "NetworkConfig",
    "NetworkError",
    "Vector",
    "add",
    "equals",
    "multiply",
    "sigmoid",
]
