# Copyright (c) 2026 Huynh Huy. All rights reserved.

"""
Tests for Face Detection
========================
"""

import numpy as np
import pytest


class TestHat:

    def test_hat_points(self):
        from cvdemo.vision.detection import hat_points

        points = hat_points(100, 100, 50, 40)

        assert points.dtype == np.int32
        np.testing.assert_array_equal(points, [[95, 96], [155, 96], [125, 80]])

    def test_hat_sits_above_face(self):
        from cvdemo.vision.detection import hat_points

        x, y, w, h = 10, 200, 80, 120
        points = hat_points(x, y, w, h)

        assert np.all(points[:, 1] < y)
        assert points[0, 0] < x
        assert points[1, 0] > x + w


class TestDrawFaces:

    def test_draws_box_and_hat(self):
        from cvdemo.vision.detection import GREEN, draw_faces

        frame = np.zeros((240, 320, 3), dtype=np.uint8)
        draw_faces(frame, [(100, 100, 50, 40)])

        assert tuple(frame[90, 125]) == GREEN
        # Left edge of the box: red only
        assert frame[120, 100, 2] > 0
        assert frame[120, 100, 0] == 0
        # Inside the box stays untouched
        assert tuple(frame[120, 125]) == (0, 0, 0)

    def test_no_faces_no_drawing(self):
        from cvdemo.vision.detection import draw_faces

        frame = np.zeros((50, 50, 3), dtype=np.uint8)
        draw_faces(frame, [])
        assert not frame.any()


class TestFaceDetector:

    @pytest.fixture
    def detector(self, cascade_path):
        from cvdemo.vision.classifier import load_classifier
        from cvdemo.vision.detection import FaceDetector

        return FaceDetector(load_classifier(cascade_path), min_neighbors=3)

    def test_blank_image_has_no_faces(self, detector):
        gray = np.full((240, 320), 128, dtype=np.uint8)

        faces = detector.detect(gray)

        assert faces == []

    def test_annotate_leaves_faceless_frame(self, detector):
        frame = np.full((240, 320, 3), 128, dtype=np.uint8)
        gray = frame[:, :, 0].copy()

        assert detector.annotate(frame, gray) == []
        assert np.all(frame == 128)

    def test_from_config(self, cascade_path):
        from cvdemo.utils.config import ClassifierConfig
        from cvdemo.vision.classifier import load_classifier
        from cvdemo.vision.detection import FaceDetector

        cfg = ClassifierConfig(scale_factor=1.3, min_neighbors=5, min_size=(20, 20))
        detector = FaceDetector.from_config(load_classifier(cascade_path), cfg)

        assert detector.scale_factor == 1.3
        assert detector.min_neighbors == 5
        assert detector.min_size == (20, 20)
