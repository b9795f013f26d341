"""
Rigid-body velocity model.

A `Velocity` describes the instantaneous motion of the chassis rotation
center relative to the ground:

    v  linear speed [m/s], negative when reversing
    w  angular speed [rad/s], positive counter-clockwise

Scaling a velocity by k scales both components, which represents the
velocity sustained over a fraction (or multiple) of a period. Multiplying by a
duration integrates it into an `Odometry` increment:

    Velocity(v, w) * k            -> Velocity(k·v, k·w)
    Velocity(v, w).integrate_over(dt) -> Odometry increment over dt seconds
    Velocity(v, w) * timedelta    -> Odometry increment over that duration

A plain number always means scaling. Use `integrate_over` (or a `timedelta`)
to integrate over a duration given in seconds.
"""

import numbers
from dataclasses import dataclass
from datetime import timedelta
from typing import Optional, Union

from ..config import Duration, IntegrationParameters
from .integration import integrate
from .odometry import Odometry


@dataclass(frozen=True)
class Velocity:
    """
    Planar rigid-body velocity of the rotation center.

    Attributes:
        v: Linear speed of the rotation center [m/s]
        w: Angular speed [rad/s]
    """

    v: float
    w: float

    def scale(self, factor: float) -> "Velocity":
        """Scale both components by `factor`."""
        return Velocity(self.v * factor, self.w * factor)

    def integrate_over(self, duration: Duration,
                       params: Optional[IntegrationParameters] = None) -> Odometry:
        """
        Integrate this velocity held constant over `duration`.

        Args:
            duration: Period in seconds or as a `timedelta`
            params: Integration parameters, defaults when omitted

        Returns:
            Odometry increment produced by the motion
        """
        return integrate(self, duration, params)

    def to_odometry(self) -> Odometry:
        """
        Odometry increment of moving at this velocity for one second.

        Equivalently, treats `v` as an already-scaled displacement [m] and `w`
        as an already-scaled heading change [rad].
        """
        return integrate(self, 1.0)

    def __mul__(self, other: Union[float, timedelta]) -> Union["Velocity", Odometry]:
        if isinstance(other, timedelta):
            return self.integrate_over(other)
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __rmul__(self, other: float) -> "Velocity":
        if isinstance(other, numbers.Real):
            return self.scale(other)
        return NotImplemented

    def __neg__(self) -> "Velocity":
        return Velocity(-self.v, -self.w)
