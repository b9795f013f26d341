import pytest
import numpy as np
import sys
import os

# Add the src directory to Python path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from chassis_odometry.geometry import Isometry2


class TestIsometry2Construction:
    """Test SE(2) pose construction and validation"""

    def test_identity(self):
        """Test identity has zero translation and zero heading"""
        pose = Isometry2.identity()

        np.testing.assert_array_equal(pose.translation, [0.0, 0.0])
        assert pose.rotation == 1 + 0j
        assert pose.angle == 0.0

    def test_from_pose(self):
        """Test construction from position and heading"""
        pose = Isometry2.from_pose(1.0, 2.0, np.pi / 2)

        assert pose.x == 1.0
        assert pose.y == 2.0
        assert pose.angle == pytest.approx(np.pi / 2)

    def test_rotation_is_normalized(self):
        """Test non-unit rotations are scaled to unit magnitude"""
        pose = Isometry2(np.zeros(2), 3 + 4j)

        assert abs(pose.rotation) == pytest.approx(1.0)
        assert pose.rotation == pytest.approx(0.6 + 0.8j)

    def test_zero_rotation_rejected(self):
        """Test a zero rotation cannot represent a heading"""
        with pytest.raises(ValueError):
            Isometry2(np.zeros(2), 0j)

    def test_bad_translation_shape_rejected(self):
        """Test translation must be a 2-vector"""
        with pytest.raises(ValueError):
            Isometry2(np.zeros(3))

    def test_translation_is_read_only(self):
        """Test poses cannot be mutated through their translation array"""
        pose = Isometry2.from_pose(1.0, 2.0, 0.0)

        with pytest.raises(ValueError):
            pose.translation[0] = 5.0

    def test_angle_wraps_to_half_open_range(self):
        """Test heading is reported within (-pi, pi]"""
        pose = Isometry2.from_pose(0.0, 0.0, 3 * np.pi / 2)

        assert pose.angle == pytest.approx(-np.pi / 2)

    def test_from_matrix(self):
        """Test construction from a homogeneous matrix"""
        T = np.array([
            [0.0, -1.0, 4.0],
            [1.0, 0.0, 5.0],
            [0.0, 0.0, 1.0],
        ])
        pose = Isometry2.from_matrix(T)

        assert pose.x == 4.0
        assert pose.y == 5.0
        assert pose.angle == pytest.approx(np.pi / 2)
        np.testing.assert_allclose(pose.as_matrix(), T)

    def test_from_matrix_rejects_wrong_shape(self):
        """Test only 3x3 matrices are accepted"""
        with pytest.raises(ValueError):
            Isometry2.from_matrix(np.eye(4))


class TestIsometry2Operations:
    """Test SE(2) composition, inversion and point transformation"""

    def test_compose_expresses_motion_in_local_frame(self):
        """Test second pose is applied in the frame of the first"""
        a = Isometry2.from_pose(1.0, 2.0, np.pi / 2)
        b = Isometry2.from_pose(1.0, 0.0, 0.0)

        c = a * b

        np.testing.assert_allclose(c.translation, [1.0, 3.0], atol=1e-12)
        assert c.angle == pytest.approx(np.pi / 2)

    def test_matmul_matches_mul(self):
        """Test @ and * are the same composition"""
        a = Isometry2.from_pose(1.0, -2.0, 0.4)
        b = Isometry2.from_pose(0.5, 0.3, -1.2)

        assert (a @ b).isclose(a * b, atol=0.0)

    def test_compose_matches_matrix_product(self):
        """Test composition agrees with homogeneous matrix multiplication"""
        a = Isometry2.from_pose(1.0, -2.0, 0.4)
        b = Isometry2.from_pose(0.5, 0.3, -1.2)

        np.testing.assert_allclose((a * b).as_matrix(), a.as_matrix() @ b.as_matrix(), atol=1e-12)

    def test_identity_is_neutral(self):
        """Test identity leaves poses unchanged on either side"""
        pose = Isometry2.from_pose(3.0, 4.0, 1.0)
        identity = Isometry2.identity()

        assert (identity * pose).isclose(pose)
        assert (pose * identity).isclose(pose)

    def test_inverse(self):
        """Test pose composed with its inverse is the identity"""
        pose = Isometry2.from_pose(3.0, -4.0, 2.5)

        assert (pose * pose.inverse()).isclose(Isometry2.identity())
        assert (pose.inverse() * pose).isclose(Isometry2.identity())

    def test_transform_point(self):
        """Test local points map into the parent frame"""
        pose = Isometry2.from_pose(1.0, 2.0, np.pi / 2)

        np.testing.assert_allclose(pose.transform_point([1.0, 0.0]), [1.0, 3.0], atol=1e-12)

    def test_composition_preserves_unit_rotation(self):
        """Test repeated composition keeps the rotation on the unit circle"""
        step = Isometry2.from_pose(0.1, 0.0, 0.1)
        pose = Isometry2.identity()
        for _ in range(1000):
            pose = pose * step

        assert abs(pose.rotation) == pytest.approx(1.0, abs=1e-12)

    def test_equality(self):
        """Test exact equality and inequality"""
        a = Isometry2.from_pose(1.0, 2.0, 0.5)
        b = Isometry2.from_pose(1.0, 2.0, 0.5)
        c = Isometry2.from_pose(1.0, 2.0, 0.6)

        assert a == b
        assert a != c
        assert hash(a) == hash(b)
