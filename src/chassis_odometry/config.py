"""
Configuration parameters for chassis odometry.

Parameter containers follow the same pattern throughout the package: plain
dataclasses whose `__post_init__` rejects physically meaningless values with
`ValueError` and flags legal-but-suspicious values with a `UserWarning`.
"""

import math
import warnings
from dataclasses import dataclass
from datetime import timedelta
from typing import Union

import numpy as np


Duration = Union[float, int, timedelta]

# Threshold below which a heading change is treated as straight-line motion
ANGLE_EPSILON: float = float(np.finfo(np.float64).eps)


def as_seconds(duration: Duration) -> float:
    """
    Convert a duration to seconds.

    Args:
        duration: Seconds as a number, or a `datetime.timedelta`

    Returns:
        Duration in seconds as a float
    """
    if isinstance(duration, timedelta):
        return duration.total_seconds()
    return float(duration)


@dataclass
class IntegrationParameters:
    """Numerical parameters for velocity integration."""

    angle_epsilon: float = ANGLE_EPSILON  # Straight-line threshold [rad]

    def __post_init__(self):
        """Validate integration parameters."""
        if not self.angle_epsilon >= 0:
            raise ValueError(f"Angle epsilon must be non-negative, got {self.angle_epsilon}")
        if self.angle_epsilon > 1e-3:
            warnings.warn(
                f"Large angle epsilon {self.angle_epsilon:.2e} rad treats visible arcs as straight lines"
            )


@dataclass
class PredictionParameters:
    """Timing parameters for trajectory prediction."""

    period: Duration = 0.01  # Control period [s]

    def __post_init__(self):
        """Validate and normalize the control period to seconds."""
        seconds = as_seconds(self.period)
        if not math.isfinite(seconds):
            raise ValueError(f"Control period must be finite, got {seconds}")
        if seconds < 0:
            raise ValueError(f"Control period must be non-negative, got {seconds}")
        if seconds == 0:
            warnings.warn("Zero control period yields identity increments only")
        self.period = seconds
