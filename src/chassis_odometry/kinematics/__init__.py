"""
Kinematics for planar chassis odometry.

This module contains the rigid-body velocity model, the odometry accumulator,
closed-form velocity integration, and the chassis model interface.
"""

from .odometry import Odometry
from .integration import integrate, integrate_numerically
from .velocity import Velocity
from .chassis import ChassisModel

__all__ = [
    "Odometry",
    "Velocity",
    "ChassisModel",
    "integrate",
    "integrate_numerically"
]
