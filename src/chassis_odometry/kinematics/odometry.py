"""
Odometry accumulator for planar dead reckoning.

An `Odometry` value is both the increment produced by one control period and
the running total obtained by folding increments together. It carries:

    s     total path length traveled [m], monotonically non-decreasing
    a     total absolute rotation [rad], monotonically non-decreasing
    pose  SE(2) position and heading relative to the integration origin

Composition Law:
    A + B means "starting from A, travel the relative motion B":

        s    = A.s + B.s
        a    = A.a + B.a
        pose = A.pose ∘ B.pose

    The pose part is associative but not commutative; the odometer parts
    commute.

Usage:
    odom = Odometry.ZERO
    for increment in increments:
        odom += increment
"""

import logging
import math
from dataclasses import dataclass
from functools import reduce
from typing import ClassVar, Iterable, Optional

from ..geometry import Isometry2

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Odometry:
    """
    Accumulated robot pose with odometer totals.

    Attributes:
        s: Total distance traveled [m]
        a: Total rotation traveled [rad]
        pose: Current position and heading as a planar rigid transform
    """

    s: float
    a: float
    pose: Isometry2

    ZERO: ClassVar["Odometry"]

    def __post_init__(self):
        """Reject negative odometer readings."""
        if self.s < 0:
            raise ValueError(f"Distance traveled must be non-negative, got {self.s}")
        if self.a < 0:
            raise ValueError(f"Rotation traveled must be non-negative, got {self.a}")

    @property
    def x(self) -> float:
        return self.pose.x

    @property
    def y(self) -> float:
        return self.pose.y

    @property
    def theta(self) -> float:
        """Heading in radians, within (-π, π]."""
        return self.pose.angle

    def compose_with(self, other: "Odometry") -> "Odometry":
        """
        Travel `other` starting from this odometry.

        Args:
            other: Increment expressed in the local frame of this pose

        Returns:
            New odometry with summed odometers and composed pose
        """
        return Odometry(
            s=self.s + other.s,
            a=self.a + other.a,
            pose=self.pose.compose(other.pose),
        )

    def __add__(self, other: "Odometry") -> "Odometry":
        if not isinstance(other, Odometry):
            return NotImplemented
        return self.compose_with(other)

    @classmethod
    def accumulate(cls, increments: Iterable["Odometry"],
                   start: Optional["Odometry"] = None) -> "Odometry":
        """
        Fold a sequence of increments into a running total.

        Args:
            increments: Odometry increments in travel order
            start: Starting odometry, `Odometry.ZERO` if omitted

        Returns:
            Odometry after traveling every increment
        """
        initial = cls.ZERO if start is None else start
        return reduce(cls.compose_with, increments, initial)

    def isclose(self, other: "Odometry", atol: float = 1e-9) -> bool:
        """Compare odometer totals and poses within an absolute tolerance."""
        return (
            abs(self.s - other.s) <= atol
            and abs(self.a - other.a) <= atol
            and self.pose.isclose(other.pose, atol=atol)
        )

    def __str__(self) -> str:
        return (
            "Odometry: { "
            f"s: {self.s:.3f}, "
            f"a: {math.degrees(self.a):.1f}°, "
            f"x: {self.x:.3f}, "
            f"y: {self.y:.3f}, "
            f"theta: {math.degrees(self.theta):.1f}° "
            "}"
        )


Odometry.ZERO = Odometry(s=0.0, a=0.0, pose=Isometry2.identity())
