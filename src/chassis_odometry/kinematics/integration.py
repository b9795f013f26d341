"""
Velocity Integration Module

This module converts a rigid-body velocity held constant over a time step
into the odometry increment it produces.

Mathematical Model:
    Over a period t the rotation center travels s = v·t along a circular arc
    while the heading changes by θ = w·t. The arc radius is r = s / θ and the
    local-frame displacement is

        Δx = r · sin(θ)
        Δy = r · (1 - cos(θ))
        Δψ = θ

    As θ → 0 the radius grows without bound and the arc degenerates into a
    straight line (Δx = s, Δy = 0), which is evaluated directly to avoid
    dividing by a vanishing angle.

    The odometer fields of the increment are the magnitudes |s| and |θ|, so
    they grow regardless of travel or turn direction.

Reference Integration:
    `integrate_numerically` solves the unicycle model

        dx/dt = v cos(ψ),  dy/dt = v sin(ψ),  dψ/dt = w

    with scipy's adaptive Runge-Kutta solvers. It exists to cross-check the
    closed form and is far slower.
"""

import logging
import math
from typing import TYPE_CHECKING, Optional

import numpy as np
from scipy.integrate import solve_ivp

from ..config import Duration, IntegrationParameters, as_seconds
from ..geometry import Isometry2
from .odometry import Odometry

if TYPE_CHECKING:
    from .velocity import Velocity

logger = logging.getLogger(__name__)

_DEFAULT_PARAMS = IntegrationParameters()


def integrate(velocity: "Velocity",
              duration: Duration = 1.0,
              params: Optional[IntegrationParameters] = None) -> Odometry:
    """
    Compute the odometry increment of a constant velocity held for `duration`.

    Args:
        velocity: Linear and angular speed of the rotation center
        duration: Integration period in seconds or as a `timedelta`
        params: Integration parameters, defaults when omitted

    Returns:
        Odometry increment in the local frame of the starting pose
    """
    params = params or _DEFAULT_PARAMS
    t = as_seconds(duration)
    s = velocity.v * t
    theta = velocity.w * t

    a = abs(theta)
    cos, sin = math.cos(theta), math.sin(theta)

    if a < params.angle_epsilon or theta == 0.0:
        pose = Isometry2.from_parts(s, 0.0, cos, sin)
    else:
        radius = s / theta
        pose = Isometry2.from_parts(radius * sin, radius * (1.0 - cos), cos, sin)

    return Odometry(s=abs(s), a=a, pose=pose)


def integrate_numerically(velocity: "Velocity",
                          duration: Duration = 1.0,
                          method: str = "RK45",
                          rtol: float = 1e-10,
                          atol: float = 1e-12) -> Odometry:
    """
    Integrate the unicycle model numerically for comparison with `integrate`.

    Args:
        velocity: Linear and angular speed of the rotation center
        duration: Integration period in seconds or as a `timedelta`
        method: Any `scipy.integrate.solve_ivp` method name
        rtol: Relative solver tolerance
        atol: Absolute solver tolerance

    Returns:
        Odometry increment in the local frame of the starting pose

    Raises:
        RuntimeError: If the solver fails to converge
    """
    t = as_seconds(duration)
    v, w = velocity.v, velocity.w

    if t == 0.0:
        return Odometry.ZERO

    def unicycle(_, state):
        heading = state[2]
        return [v * np.cos(heading), v * np.sin(heading), w]

    solution = solve_ivp(unicycle, (0.0, t), np.zeros(3),
                         method=method, rtol=rtol, atol=atol)
    if not solution.success:
        raise RuntimeError(f"Reference integration failed: {solution.message}")

    x, y, heading = solution.y[:, -1]
    logger.debug(f"Reference integration used {solution.nfev} evaluations")

    return Odometry(
        s=abs(v * t),
        a=abs(w * t),
        pose=Isometry2.from_pose(float(x), float(y), float(heading)),
    )
