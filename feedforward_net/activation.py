import math

import numpy as np


def sigmoid(z: float) -> float:
    if z >= 0:
        return 1.0 / (1.0 + math.exp(-z))
    # mirrored form, exp(-z) would overflow for z below about -709
    e = math.exp(z)
    return e / (1.0 + e)


def sigmoid_array(z) -> np.ndarray:
    """Element-wise sigmoid, output compression between 0-1."""
    z = np.asarray(z, dtype=float)
    e = np.exp(-np.abs(z))
    return np.where(z >= 0, 1.0 / (1.0 + e), e / (1.0 + e))
