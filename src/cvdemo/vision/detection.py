# Copyright (c) 2026 Huynh Huy. All rights reserved.

"""
Face Detection
==============

Haar-cascade face detection with rectangle and "hat" annotations.
"""

from __future__ import annotations

from typing import List, Tuple

import cv2
import numpy as np

Rect = Tuple[int, int, int, int]  # (x, y, w, h)

# BGR
RED = (0, 0, 255)
GREEN = (0, 255, 0)


def detect_faces(
    classifier: cv2.CascadeClassifier,
    gray: np.ndarray,
    scale_factor: float = 1.1,
    min_neighbors: int = 3,
    min_size: Tuple[int, int] = (0, 0),
) -> List[Rect]:
    faces = classifier.detectMultiScale(
        gray,
        scaleFactor=scale_factor,
        minNeighbors=min_neighbors,
        minSize=tuple(min_size),
    )
    # detectMultiScale returns an empty tuple when nothing is found
    return [(int(x), int(y), int(w), int(h)) for (x, y, w, h) in faces]


def hat_points(x: int, y: int, w: int, h: int) -> np.ndarray:
    """Triangle sitting on top of a face rectangle, as (3, 2) int32 points."""
    return np.array(
        [
            [x - w // 10, y - h // 10],
            [x + w * 11 // 10, y - h // 10],
            [x + w // 2, y - h // 2],
        ],
        dtype=np.int32,
    )


def draw_faces(frame: np.ndarray, faces: List[Rect]) -> np.ndarray:
    """Draw a red box and a green hat for every face, in place."""
    for (x, y, w, h) in faces:
        cv2.rectangle(frame, (x, y), (x + w, y + h), RED, 1, cv2.LINE_AA)
        cv2.fillConvexPoly(frame, hat_points(x, y, w, h), GREEN, cv2.LINE_AA)
    return frame


class FaceDetector:
    """Cascade classifier plus its detectMultiScale parameters."""

    def __init__(
        self,
        classifier: cv2.CascadeClassifier,
        scale_factor: float = 1.1,
        min_neighbors: int = 3,
        min_size: Tuple[int, int] = (0, 0),
    ):
        self.classifier = classifier
        self.scale_factor = scale_factor
        self.min_neighbors = min_neighbors
        self.min_size = tuple(min_size)

    @classmethod
    def from_config(cls, classifier: cv2.CascadeClassifier, config) -> "FaceDetector":
        return cls(
            classifier,
            scale_factor=config.scale_factor,
            min_neighbors=config.min_neighbors,
            min_size=config.min_size,
        )

    def detect(self, gray: np.ndarray) -> List[Rect]:
        return detect_faces(
            self.classifier,
            gray,
            scale_factor=self.scale_factor,
            min_neighbors=self.min_neighbors,
            min_size=self.min_size,
        )

    def annotate(self, frame: np.ndarray, gray: np.ndarray) -> List[Rect]:
        """Detect faces on ``gray`` and draw them onto ``frame``."""
        faces = self.detect(gray)
        draw_faces(frame, faces)
        return faces
