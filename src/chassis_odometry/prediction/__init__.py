"""
Trajectory prediction for chassis odometry.

This module turns streams of predicted chassis states into streams of
odometry increments, one per control period.
"""

from .predictor import StatusPredictor, IterablePredictor, ConstantPredictor
from .trajectory import TrajectoryPredictor

__all__ = [
    "StatusPredictor",
    "IterablePredictor",
    "ConstantPredictor",
    "TrajectoryPredictor"
]
