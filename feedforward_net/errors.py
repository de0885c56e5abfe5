"""Exceptions raised by the matrix, vector and network code."""


class NetworkError(Exception):
    """Base class for every error raised by feedforward_net."""


class DimensionMismatch(NetworkError, ValueError):
    """Operands have incompatible shapes (multiply, add, construction)."""


class IndexOutOfRange(NetworkError, IndexError):
    """Element access outside the declared bounds."""


class InvalidTopology(NetworkError, ValueError):
    """Network built with no layers or a non-positive layer width."""


class InputShapeMismatch(NetworkError, ValueError):
    """feedForward input length differs from the input layer width."""


class InputRangeError(NetworkError, ValueError):
    """feedForward input holds a value outside [0, 1]."""
