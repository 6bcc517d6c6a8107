# Copyright (c) 2026 Huynh Huy. All rights reserved.

"""Contour extraction and polygon approximation."""

from __future__ import annotations

from typing import List

import cv2
import numpy as np

BLUE = (255, 0, 0)


def binarize(gray: np.ndarray, threshold: float = 64.0, max_value: float = 255.0) -> np.ndarray:
    _, binary = cv2.threshold(gray, threshold, max_value, cv2.THRESH_BINARY)
    return binary


def find_contours(binary: np.ndarray) -> List[np.ndarray]:
    contours, _ = cv2.findContours(binary, cv2.RETR_LIST, cv2.CHAIN_APPROX_SIMPLE)
    return list(contours)


def approximate(contour: np.ndarray, epsilon_ratio: float = 0.02) -> np.ndarray:
    """Closed Douglas-Peucker polygon, epsilon relative to the perimeter."""
    epsilon = cv2.arcLength(contour, True) * epsilon_ratio
    return cv2.approxPolyDP(contour, epsilon, True)


def draw_contours(
    frame: np.ndarray,
    gray: np.ndarray,
    threshold: float = 64.0,
    max_value: float = 255.0,
    epsilon_ratio: float = 0.02,
) -> List[np.ndarray]:
    """Threshold ``gray``, then draw the approximated contours onto ``frame``.

    Returns:
        The approximated polygons, one per contour found.
    """
    binary = binarize(gray, threshold, max_value)
    polygons = [approximate(c, epsilon_ratio) for c in find_contours(binary)]
    for polygon in polygons:
        cv2.drawContours(frame, [polygon], -1, BLUE)
    return polygons
