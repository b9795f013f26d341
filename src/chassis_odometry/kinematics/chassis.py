"""
Chassis model interface.

Drivetrains differ in how they describe their motion (wheel speeds for a
differential drive, speed plus steering angle for an ackermann vehicle,
a joystick command for a teleoperated base). A `ChassisModel` maps its own
state representation onto the common `Velocity` of the rotation center,
which the integrator then turns into odometry.

Implementations must be deterministic and side-effect free. Validating
physical plausibility (wheel slip limits, steering range) belongs to the
implementation, before a `Velocity` is produced.

Example:
    class DifferentialDrive(ChassisModel[Tuple[float, float]]):
        def __init__(self, wheel_base):
            self.wheel_base = wheel_base

        def velocity_from(self, state):
            left, right = state
            return Velocity((left + right) / 2.0,
                            (right - left) / self.wheel_base)
"""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

from ..config import Duration, IntegrationParameters
from .odometry import Odometry
from .velocity import Velocity

State = TypeVar("State")


class ChassisModel(ABC, Generic[State]):
    """Maps a chassis-specific state onto the velocity of its rotation center."""

    @abstractmethod
    def velocity_from(self, state: State) -> Velocity:
        """
        Estimate the rotation-center velocity implied by a chassis state.

        Args:
            state: Implementation-defined state or command

        Returns:
            Velocity of the rotation center relative to the ground
        """

    def velocity_from_measure(self, measure) -> Velocity:
        """
        Estimate the rotation-center velocity from an odometry measurement.

        Models whose measurements differ from their drive state (encoder
        ticks versus commanded wheel speeds) override this. By default a
        measurement is interpreted like a state.
        """
        return self.velocity_from(measure)

    def odometry_from(self, state: State, duration: Duration,
                      params: Optional[IntegrationParameters] = None) -> Odometry:
        """Integrate the velocity implied by `state` over `duration`."""
        return self.velocity_from(state).integrate_over(duration, params)
