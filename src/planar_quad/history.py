"""
Trajectory history for the planar quadrotor.

Stores one (x, y, theta) sample per completed integration step as the
columns of a 3 x N array.  Two eviction policies are supported, chosen at
construction:

- unbounded (capacity=None): every sample is kept.
- ring buffer (capacity=k): only the newest k samples are kept; the oldest
  sample is overwritten once the buffer is full.
"""

from typing import Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

from planar_quad.types import HISTORY_ROWS, STATE_DIM, as_vector

_INITIAL_COLS = 64


class TrajectoryHistory:
    """
    Append-only (x, y, theta) log.

    Attributes:
        capacity: Maximum number of retained samples, or None for unbounded
    """

    def __init__(self, capacity: Optional[int] = None) -> None:
        if capacity is not None:
            capacity = int(capacity)
            if capacity < 1:
                raise ValueError(f"History capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self.clear()

    @property
    def bounded(self) -> bool:
        """True if this history evicts old samples."""
        return self.capacity is not None

    def __len__(self) -> int:
        return self._count

    def append(self, sample: ArrayLike) -> None:
        """
        Append one (x, y, theta) sample as the newest column.

        Args:
            sample: Pose sample, shape (3,)
        """
        sample = as_vector(sample, HISTORY_ROWS, "sample")

        if self.capacity is None:
            if self._count == self._data.shape[1]:
                # Amortized growth
                grown = np.zeros((HISTORY_ROWS, 2 * self._data.shape[1]))
                grown[:, :self._count] = self._data
                self._data = grown
            self._data[:, self._count] = sample
            self._count += 1
            return

        self._data[:, self._head] = sample
        self._head = (self._head + 1) % self.capacity
        self._count = min(self._count + 1, self.capacity)

    def record_state(self, z: ArrayLike) -> None:
        """Append the pose slice (x, y, theta) of a full state vector."""
        z = as_vector(z, STATE_DIM, "z")
        self.append(z[0:HISTORY_ROWS])

    def as_array(self) -> NDArray[np.float64]:
        """
        Retained samples in chronological order.

        Returns:
            Copy of the history, shape (3, N)
        """
        if self.capacity is None or self._count < self.capacity:
            return self._data[:, :self._count].copy()
        # Full ring buffer: oldest sample sits at the write head
        return np.roll(self._data, -self._head, axis=1)

    @property
    def x(self) -> NDArray[np.float64]:
        """x series, shape (N,)"""
        return self.as_array()[0]

    @property
    def y(self) -> NDArray[np.float64]:
        """y series, shape (N,)"""
        return self.as_array()[1]

    @property
    def theta(self) -> NDArray[np.float64]:
        """theta series, shape (N,)"""
        return self.as_array()[2]

    def clear(self) -> None:
        """Drop all samples, keeping the eviction policy."""
        n_cols = self.capacity if self.capacity is not None else _INITIAL_COLS
        self._data = np.zeros((HISTORY_ROWS, n_cols))
        self._count = 0  # samples currently retained
        self._head = 0   # next write column (ring buffer only)

    def __repr__(self) -> str:
        policy = "unbounded" if self.capacity is None else f"capacity={self.capacity}"
        return f"TrajectoryHistory({policy}, samples={self._count})"
