# Copyright (c) 2026 Huynh Huy. All rights reserved.

"""
Tests for the Random Warp
=========================
"""

import cv2
import numpy as np


class TestRotation:

    def test_zero_axis_is_identity(self):
        from cvdemo.vision.warp import rotation_homography

        h = rotation_homography(np.zeros(3), 640, 480)
        np.testing.assert_allclose(h, np.eye(3), atol=1e-12)

    def test_focal_scaling(self):
        """Translation column scaled up by f, projective row scaled down by f."""
        from cvdemo.vision.warp import rotation_homography

        axis = np.array([0.05, -0.08, 0.1])
        rotation, _ = cv2.Rodrigues(axis.reshape(3, 1))
        f = (640 + 480) / 2.0

        h = rotation_homography(axis, 640, 480)

        assert h.shape == (3, 3)
        assert h.dtype == np.float64
        np.testing.assert_allclose(h[0, 2], rotation[0, 2] * f)
        np.testing.assert_allclose(h[1, 2], rotation[1, 2] * f)
        np.testing.assert_allclose(h[2, 0], rotation[2, 0] / f)
        np.testing.assert_allclose(h[2, 1], rotation[2, 1] / f)
        np.testing.assert_allclose(h[:2, :2], rotation[:2, :2])
        np.testing.assert_allclose(h[2, 2], rotation[2, 2])

    def test_axis_range(self):
        from cvdemo.vision.warp import random_axis

        rng = np.random.default_rng(0)
        for _ in range(100):
            axis = random_axis(0.25, rng)
            assert axis.shape == (3, 1)
            assert np.all(np.abs(axis) <= 0.125)

    def test_seeded_rotation_is_reproducible(self):
        from cvdemo.vision.warp import random_rotation

        a = random_rotation(640, 480, rng=np.random.default_rng(42))
        b = random_rotation(640, 480, rng=np.random.default_rng(42))
        c = random_rotation(640, 480, rng=np.random.default_rng(43))

        np.testing.assert_array_equal(a, b)
        assert not np.allclose(a, c)


class TestWarpFrame:

    def test_keeps_frame_size(self, sample_frame):
        from cvdemo.vision.warp import random_rotation, warp_frame

        h = random_rotation(640, 480, rng=np.random.default_rng(1))
        warped = warp_frame(sample_frame, h)

        assert warped.shape == sample_frame.shape
        assert warped.dtype == sample_frame.dtype

    def test_identity_leaves_frame_unchanged(self, sample_frame):
        from cvdemo.vision.warp import warp_frame

        np.testing.assert_array_equal(warp_frame(sample_frame, np.eye(3)), sample_frame)
