"""
Status predictors: lazy sources of future chassis states.

A `StatusPredictor` yields the state the chassis is expected to be in at each
upcoming control period, or `None` once it has nothing more to predict. It
also behaves as a Python iterator over those states.

Cloning:
    `clone()` returns an independent predictor positioned at the same point
    of the sequence; advancing one never affects the other. The default
    implementation deep-copies the predictor, which is correct whenever the
    internal state is copyable. `IterablePredictor` clones arbitrary
    generators through `itertools.tee`.
"""

import copy
import itertools
from abc import ABC, abstractmethod
from typing import Generic, Iterable, Iterator, Optional, TypeVar


State = TypeVar("State")


class StatusPredictor(ABC, Generic[State]):
    """Produces the predicted chassis state for each successive period."""

    @abstractmethod
    def predict(self) -> Optional[State]:
        """
        Predict the state for the next period.

        Returns:
            The next state, or None when the prediction sequence has ended
        """

    def clone(self) -> "StatusPredictor[State]":
        """Return an independent copy positioned at the same point."""
        return copy.deepcopy(self)

    def __iter__(self) -> Iterator[State]:
        return self

    def __next__(self) -> State:
        state = self.predict()
        if state is None:
            raise StopIteration
        return state


class IterablePredictor(StatusPredictor[State]):
    """
    Replays states from any iterable, finite or not.

    Clones share the underlying iterator through `itertools.tee` buffers,
    so each copy sees every remaining state exactly once.
    """

    def __init__(self, states: Iterable[State]):
        self._states = iter(states)

    def predict(self) -> Optional[State]:
        return next(self._states, None)

    def clone(self) -> "IterablePredictor[State]":
        other = copy.copy(self)
        self._states, other._states = itertools.tee(self._states)
        return other


class ConstantPredictor(StatusPredictor[State]):
    """
    Predicts the same state every period.

    Args:
        state: State repeated each period
        steps: Number of periods to predict, unbounded when None
    """

    def __init__(self, state: State, steps: Optional[int] = None):
        if steps is not None and steps < 0:
            raise ValueError(f"Step count must be non-negative, got {steps}")
        self.state = state
        self.remaining = steps

    def predict(self) -> Optional[State]:
        if self.remaining is not None:
            if self.remaining == 0:
                return None
            self.remaining -= 1
        return self.state
