"""
Chassis Odometry: Planar Kinematics and Dead Reckoning for Mobile Robots

A scientific Python package converting rigid-body chassis velocities into
pose increments and accumulating them into a running pose estimate.

This package implements:
- SE(2) rigid transforms for planar poses
- Rigid-body velocity model with closed-form arc integration
- Odometry accumulation with monotonic distance and rotation odometers
- Chassis model interface for arbitrary drivetrains
- Trajectory prediction from streams of predicted chassis states

Concrete drivetrains (differential drive, omni, ackermann) implement
`ChassisModel` outside this package.
"""

from .geometry import Isometry2
from .kinematics import ChassisModel, Odometry, Velocity, integrate, integrate_numerically
from .prediction import ConstantPredictor, IterablePredictor, StatusPredictor, TrajectoryPredictor
from .config import IntegrationParameters, PredictionParameters

__version__ = "1.0.0"
__author__ = "Chassis Odometry Team"

__all__ = [
    "Isometry2",
    "Velocity",
    "Odometry",
    "ChassisModel",
    "integrate",
    "integrate_numerically",
    "StatusPredictor",
    "IterablePredictor",
    "ConstantPredictor",
    "TrajectoryPredictor",
    "IntegrationParameters",
    "PredictionParameters"
]
