"""
Planar geometry for chassis odometry.

This module contains the SE(2) rigid transform used to represent robot poses.
"""

from .se2 import Isometry2

__all__ = [
    "Isometry2"
]
