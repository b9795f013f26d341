"""
Planar Rigid Transform Module

This module implements the SE(2) pose used throughout the odometry core: a
2-D translation paired with a unit-magnitude rotation.

Mathematical Framework:
    A pose T = (t, r) maps a point p from the local frame into the parent frame:

        p_parent = R(r) * p_local + t

    The rotation is stored as a unit complex number r = cos(θ) + i·sin(θ), so
    rotation composition is complex multiplication and rotating a vector
    (x, y) is the product r · (x + i·y).

    Composition (apply b in the frame established by a):

        a ∘ b = (t_a + R(r_a) * t_b,  r_a · r_b)

    Composition is associative but not commutative.

Author: Scientific Computing Team
License: MIT
"""

import math
from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np


ArrayLike = Union[Sequence[float], np.ndarray]


@dataclass(frozen=True, eq=False)
class Isometry2:
    """
    Rigid body transformation (rotation + translation) in SE(2).

    Instances are immutable: the translation array is flagged read-only and
    every operation returns a new pose.

    Attributes:
        translation: (2,) float64 translation vector [x, y] in meters
        rotation: Unit complex number cos(θ) + i·sin(θ)
    """

    translation: np.ndarray
    rotation: complex = 1 + 0j

    def __post_init__(self) -> None:
        """Validate shapes and normalize the rotation to unit magnitude."""
        translation = np.array(self.translation, dtype=np.float64).flatten()
        if translation.shape != (2,):
            raise ValueError(f"Translation must be (2,), got {translation.shape}")
        translation.setflags(write=False)

        rotation = complex(self.rotation)
        magnitude = abs(rotation)
        if magnitude == 0.0:
            raise ValueError("Rotation must have non-zero magnitude")
        if magnitude != 1.0:
            rotation = rotation / magnitude

        object.__setattr__(self, "translation", translation)
        object.__setattr__(self, "rotation", rotation)

    @classmethod
    def identity(cls) -> "Isometry2":
        """Create the identity transform (no rotation, no translation)."""
        return cls(np.zeros(2), 1 + 0j)

    @classmethod
    def from_parts(cls, x: float, y: float, cos: float, sin: float) -> "Isometry2":
        """
        Create a pose from a translation and precomputed rotation components.

        Args:
            x: Translation along the parent x-axis [m]
            y: Translation along the parent y-axis [m]
            cos: Cosine of the heading
            sin: Sine of the heading

        Returns:
            Isometry2 with the given translation and heading
        """
        return cls(np.array([x, y], dtype=np.float64), complex(cos, sin))

    @classmethod
    def from_pose(cls, x: float, y: float, theta: float) -> "Isometry2":
        """Create a pose from position [m] and heading [rad]."""
        return cls.from_parts(x, y, math.cos(theta), math.sin(theta))

    @classmethod
    def from_matrix(cls, T: ArrayLike) -> "Isometry2":
        """
        Create a pose from a 3x3 homogeneous transformation matrix.

        Args:
            T: 3x3 matrix of the form [[R t], [0 1]]

        Returns:
            Isometry2 transformation
        """
        T = np.asarray(T, dtype=np.float64)
        if T.shape != (3, 3):
            raise ValueError(f"Transform must be 3x3, got {T.shape}")
        return cls(T[:2, 2], complex(T[0, 0], T[1, 0]))

    @property
    def x(self) -> float:
        return float(self.translation[0])

    @property
    def y(self) -> float:
        return float(self.translation[1])

    @property
    def angle(self) -> float:
        """Heading angle in radians, within (-π, π]."""
        return math.atan2(self.rotation.imag, self.rotation.real)

    @property
    def rotation_matrix(self) -> np.ndarray:
        """2x2 rotation matrix equivalent to the unit complex rotation."""
        c, s = self.rotation.real, self.rotation.imag
        return np.array([[c, -s], [s, c]])

    def as_matrix(self) -> np.ndarray:
        """Return the 3x3 homogeneous transformation matrix."""
        T = np.eye(3)
        T[:2, :2] = self.rotation_matrix
        T[:2, 2] = self.translation
        return T

    def transform_point(self, point: ArrayLike) -> np.ndarray:
        """
        Map a point from the local frame into the parent frame.

        Args:
            point: (2,) point in the local frame

        Returns:
            (2,) point in the parent frame
        """
        p = np.asarray(point, dtype=np.float64)
        return self.rotation_matrix @ p + self.translation

    def compose(self, other: "Isometry2") -> "Isometry2":
        """
        Compose two poses: travel `other`, expressed in this pose's frame.

        Args:
            other: Relative motion in the local frame of this pose

        Returns:
            The combined pose self ∘ other
        """
        rotated = self.rotation * complex(other.translation[0], other.translation[1])
        translation = self.translation + np.array([rotated.real, rotated.imag])
        return Isometry2(translation, self.rotation * other.rotation)

    def inverse(self) -> "Isometry2":
        """Return the inverse transform, so that T ∘ T⁻¹ is the identity."""
        conj = self.rotation.conjugate()
        back = -conj * complex(self.translation[0], self.translation[1])
        return Isometry2(np.array([back.real, back.imag]), conj)

    def isclose(self, other: "Isometry2", atol: float = 1e-9) -> bool:
        """
        Compare poses within an absolute tolerance.

        Headings are compared through the rotation components, so angles
        that differ by a full turn compare equal.
        """
        return bool(
            np.allclose(self.translation, other.translation, rtol=0.0, atol=atol)
            and abs(self.rotation - other.rotation) <= atol
        )

    def __mul__(self, other: "Isometry2") -> "Isometry2":
        if not isinstance(other, Isometry2):
            return NotImplemented
        return self.compose(other)

    __matmul__ = __mul__

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Isometry2):
            return NotImplemented
        return bool(
            np.array_equal(self.translation, other.translation)
            and self.rotation == other.rotation
        )

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.rotation))

    def __repr__(self) -> str:
        return (f"Isometry2(x={self.x:.4f}, y={self.y:.4f}, "
                f"theta={math.degrees(self.angle):.2f}°)")
