"""
Core array conventions for the planar quadrotor.

All vectors are 1-D float64 numpy arrays with the shapes noted below.

State z, shape (6,):      [x, y, theta, x_dot, y_dot, theta_dot]
Input u, shape (2,):      [u_1, u_2]  (left, right thrust [N])
History, shape (3, N):    rows x, y, theta
"""

from typing import Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

STATE_DIM = 6
INPUT_DIM = 2
HISTORY_ROWS = 3


def as_vector(value: ArrayLike, size: int, name: str) -> NDArray[np.float64]:
    """
    Convert ``value`` to a float64 vector of exactly ``size`` components.

    A fresh array is always returned, so callers never alias the input.

    Args:
        value: Anything numpy can turn into a 1-D array
        size: Required number of components
        name: Argument name used in the error message

    Returns:
        Array of shape (size,)

    Raises:
        ValueError: If the value does not have shape (size,)
    """
    arr = np.array(value, dtype=np.float64)
    if arr.shape != (size,):
        raise ValueError(
            f"{name} must have shape ({size},), got shape {arr.shape}"
        )
    return arr


def random_state(rng: Optional[np.random.Generator] = None) -> NDArray[np.float64]:
    """
    Draw a state with each component from an independent standard normal.

    Args:
        rng: Random source; a fresh entropy-seeded generator if None

    Returns:
        State vector, shape (6,)
    """
    if rng is None:
        rng = np.random.default_rng()
    return rng.standard_normal(STATE_DIM)


def zero_state() -> NDArray[np.float64]:
    """Zero state: at the origin, level, at rest."""
    return np.zeros(STATE_DIM)


def zero_input() -> NDArray[np.float64]:
    """Zero thrust on both propellers."""
    return np.zeros(INPUT_DIM)
