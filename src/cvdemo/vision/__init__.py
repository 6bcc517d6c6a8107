# Copyright (c) 2026 Huynh Huy. All rights reserved.

"""cvdemo Vision Steps."""

from cvdemo.vision.classifier import load_classifier, resolve_classifier_path
from cvdemo.vision.contours import approximate, binarize, draw_contours, find_contours
from cvdemo.vision.detection import FaceDetector, detect_faces, draw_faces, hat_points
from cvdemo.vision.warp import random_rotation, rotation_homography, warp_frame

__all__ = [
    "load_classifier",
    "resolve_classifier_path",
    "approximate",
    "binarize",
    "draw_contours",
    "find_contours",
    "FaceDetector",
    "detect_faces",
    "draw_faces",
    "hat_points",
    "random_rotation",
    "rotation_homography",
    "warp_frame",
]
