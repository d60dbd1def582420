"""
Planar quadrotor physical parameters.

Default values follow the common PVTOL benchmark airframe
(~0.5 kg, 25 cm arm).
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class PlanarParams:
    """
    Fixed physical constants of the planar quadrotor.

    Attributes:
        m: Mass [kg]
        I: Rotational inertia about the out-of-plane axis [kg·m²]
        r: Half-length, moment arm of each propeller [m]
        g: Gravitational acceleration [m/s²]
    """

    m: float = 0.486
    I: float = 0.00383
    r: float = 0.25
    g: float = 9.81

    def __post_init__(self) -> None:
        """Reject parameters that the dynamics divide by."""
        if not self.m > 0.0:
            raise ValueError(f"Mass must be positive, got m={self.m}")
        if not self.I > 0.0:
            raise ValueError(f"Inertia must be positive, got I={self.I}")

    @property
    def hover_thrust(self) -> float:
        """Total thrust required for hover."""
        return self.m * self.g

    def as_array(self) -> NDArray[np.float64]:
        """Parameters packed as [m, I, r, g], shape (4,)."""
        return np.array([self.m, self.I, self.r, self.g], dtype=np.float64)


def default_params() -> PlanarParams:
    """
    Create default parameters for the planar quadrotor.

    Returns a PlanarParams instance with the benchmark airframe values.
    """
    return PlanarParams()


if __name__ == "__main__":
    p = default_params()
    print("Default Parameters:")
    print(f"  Mass:         {p.m} kg")
    print(f"  Inertia:      {p.I} kg·m²")
    print(f"  Arm length:   {p.r} m")
    print(f"  Hover thrust: {p.hover_thrust:.3f} N")
