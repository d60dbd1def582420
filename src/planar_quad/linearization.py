"""
Linearization of the planar quadrotor dynamics.

Produces the continuous-time state-space pair (A, B) such that, near an
operating point (z*, u*),

    d/dt (z - z*) ≈ A (z - z*) + B (u - u*)

The default operating point is hover at the origin: z* = 0 with the
gravity-compensating thrust.

``numerical_jacobians`` is a verification helper: central differences of any
``f(z, u)``, for cross-checking the analytic matrices.
"""

from typing import Callable, Optional, Tuple

import numpy as np
from numpy.typing import ArrayLike, NDArray

from planar_quad.dynamics import gravity_comp_input
from planar_quad.logging_setup import logger
from planar_quad.params import PlanarParams
from planar_quad.types import INPUT_DIM, STATE_DIM, as_vector, zero_state


def linearize(
    params: PlanarParams,
    z_star: Optional[ArrayLike] = None,
    u_star: Optional[ArrayLike] = None,
) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Jacobians of the dynamics about an operating point.

    Args:
        params: System parameters
        z_star: Operating state, shape (6,) (default: zero state)
        u_star: Operating input, shape (2,) (default: gravity compensation)

    Returns:
        Tuple of (A, B) with shapes (6, 6) and (6, 2)
    """
    z_star = zero_state() if z_star is None else as_vector(z_star, STATE_DIM, "z_star")
    if u_star is None:
        u_star = gravity_comp_input(params)
    else:
        u_star = as_vector(u_star, INPUT_DIM, "u_star")

    m, I, r = params.m, params.I, params.r
    theta = z_star[2]
    u_1, u_2 = u_star

    A = np.zeros((STATE_DIM, STATE_DIM))
    B = np.zeros((STATE_DIM, INPUT_DIM))

    # df_i/dz_j
    A[0:3, 3:6] = np.eye(3)
    A[3, 0:3] = [0.0, 0.0, -(u_1 + u_2) * np.cos(theta) / m]
    A[4, 0:3] = [0.0, 0.0, -(u_1 + u_2) * np.sin(theta) / m]

    # df_i/du_j
    B[3, :] = -np.sin(theta) / m
    B[4, :] = np.cos(theta) / m
    B[5, :] = [r / I, -r / I]

    logger.debug("Linearized about theta={:.4f}, u=({:.4f}, {:.4f})", theta, u_1, u_2)
    return A, B


def numerical_jacobians(
    f: Callable[[NDArray[np.float64], NDArray[np.float64]], NDArray[np.float64]],
    z_star: ArrayLike,
    u_star: ArrayLike,
    eps: float = 1e-6,
) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Central-difference Jacobians of ``f(z, u)``.

    Used to cross-check the analytic linearization.

    Args:
        f: Dynamics function returning z_dot, shape (6,)
        z_star: Operating state, shape (6,)
        u_star: Operating input, shape (2,)
        eps: Perturbation size

    Returns:
        Tuple of (A, B) with shapes (6, 6) and (6, 2)
    """
    z_star = as_vector(z_star, STATE_DIM, "z_star")
    u_star = as_vector(u_star, INPUT_DIM, "u_star")

    A = np.zeros((STATE_DIM, STATE_DIM))
    for j in range(STATE_DIM):
        dz = np.zeros(STATE_DIM)
        dz[j] = eps
        A[:, j] = (f(z_star + dz, u_star) - f(z_star - dz, u_star)) / (2 * eps)

    B = np.zeros((STATE_DIM, INPUT_DIM))
    for j in range(INPUT_DIM):
        du = np.zeros(INPUT_DIM)
        du[j] = eps
        B[:, j] = (f(z_star, u_star + du) - f(z_star, u_star - du)) / (2 * eps)

    return A, B
