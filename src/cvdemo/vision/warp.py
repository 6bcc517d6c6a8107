# Copyright (c) 2026 Huynh Huy. All rights reserved.

"""
Random Perspective Warp
=======================

Builds a fixed homography from a small random 3D rotation and applies it to
frames.

The rotation comes from a random axis-angle vector via Rodrigues. Its
translation column is scaled up by the focal estimate ``f`` and its
projective row scaled down by ``f``, so the matrix acts on pixel
coordinates instead of normalized ones.
"""

from __future__ import annotations

from typing import Optional

import cv2
import numpy as np


def focal_length(width: int, height: int) -> float:
    return (width + height) / 2.0


def random_axis(spread: float = 0.25, rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """Axis-angle vector (3, 1) with components in [-spread/2, spread/2)."""
    if rng is None:
        rng = np.random.default_rng()
    return ((rng.random(3) - 0.5) * spread).reshape(3, 1)


def rotation_homography(axis: np.ndarray, width: int, height: int) -> np.ndarray:
    rotation, _ = cv2.Rodrigues(np.asarray(axis, dtype=np.float64).reshape(3, 1))
    f = focal_length(width, height)
    rotation[0, 2] *= f
    rotation[1, 2] *= f
    rotation[2, 0] /= f
    rotation[2, 1] /= f
    return rotation


def random_rotation(
    width: int,
    height: int,
    spread: float = 0.25,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    return rotation_homography(random_axis(spread, rng), width, height)


def warp_frame(frame: np.ndarray, homography: np.ndarray) -> np.ndarray:
    """Perspective-warp ``frame``; the output keeps the input size."""
    height, width = frame.shape[:2]
    return cv2.warpPerspective(frame, homography, (width, height))
