"""
Trajectory prediction from predicted chassis states.

A `TrajectoryPredictor` chains three collaborators:

    StatusPredictor --state--> ChassisModel --velocity--> integrate(period)

and yields one `Odometry` increment per control period. Each increment
depends only on the next predicted state and the fixed period, so the
sequence ends exactly when the status predictor ends.

Usage:
    trajectory = TrajectoryPredictor(model, period=0.02, predictor=predictor)
    for pose in trajectory.rollout(start=current_odometry):
        ...
"""

import copy
import itertools
import logging
from typing import Generic, Iterator, List, Optional, TypeVar

from ..config import Duration, IntegrationParameters, PredictionParameters
from ..kinematics import ChassisModel, Odometry, Velocity
from .predictor import StatusPredictor

logger = logging.getLogger(__name__)

State = TypeVar("State")


class TrajectoryPredictor(Generic[State]):
    """
    Iterator of odometry increments over successive control periods.

    Attributes:
        model: Chassis model converting states into velocities
        period: Control period [s]
        predictor: Source of predicted chassis states
        steps: Number of increments produced so far
    """

    def __init__(self,
                 model: ChassisModel[State],
                 period: Duration,
                 predictor: StatusPredictor[State],
                 params: Optional[IntegrationParameters] = None):
        """
        Initialize the trajectory predictor.

        Args:
            model: Chassis model converting states into velocities
            period: Control period in seconds or as a `timedelta`
            predictor: Source of predicted chassis states
            params: Integration parameters, defaults when omitted

        Raises:
            ValueError: If the period is negative or not finite
        """
        self.model = model
        self.period = PredictionParameters(period).period
        self.predictor = predictor
        self.params = params
        self.steps = 0
        self._exhausted = False

        logger.info(f"TrajectoryPredictor initialized with period={self.period:.4f}s, "
                    f"model={type(model).__name__}, predictor={type(predictor).__name__}")

    def __iter__(self) -> Iterator[Odometry]:
        return self

    def __next__(self) -> Odometry:
        state = self.predictor.predict()
        if state is None:
            if not self._exhausted:
                logger.debug(f"State predictor exhausted after {self.steps} steps")
                self._exhausted = True
            raise StopIteration

        velocity = self.model.velocity_from(state)
        if not isinstance(velocity, Velocity):
            raise TypeError(
                f"{type(self.model).__name__}.velocity_from returned "
                f"{type(velocity).__name__}, expected Velocity"
            )

        increment = velocity.integrate_over(self.period, self.params)
        self.steps += 1
        logger.debug(f"Step {self.steps}: v={velocity.v:.3f}m/s, w={velocity.w:.3f}rad/s, "
                     f"ds={increment.s:.4f}m, da={increment.a:.4f}rad")
        return increment

    def clone(self) -> "TrajectoryPredictor[State]":
        """Return an independent predictor at the same point of the sequence."""
        other = copy.copy(self)
        other.predictor = self.predictor.clone()
        return other

    def rollout(self, start: Optional[Odometry] = None) -> Iterator[Odometry]:
        """
        Yield the running odometry after each predicted period.

        Args:
            start: Odometry at the beginning of the rollout, origin if omitted

        Yields:
            Accumulated odometry, one value per period
        """
        odometry = Odometry.ZERO if start is None else start
        for increment in self:
            odometry += increment
            yield odometry

    def collect(self, limit: Optional[int] = None) -> List[Odometry]:
        """
        Drain increments into a list.

        Args:
            limit: Maximum number of increments, required for infinite predictors

        Returns:
            Increments in travel order
        """
        if limit is None:
            return list(self)
        return list(itertools.islice(self, limit))
