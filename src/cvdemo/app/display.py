# Copyright (c) 2026 Huynh Huy. All rights reserved.

"""OpenCV preview window with gamma correction and close detection."""

from typing import Optional

import cv2
import numpy as np

from cvdemo.utils import get_logger

QUIT_KEYS = (27, ord("q"))  # Esc, q


def gamma_table(gamma: float) -> np.ndarray:
    """256-entry uint8 lookup table applying ``out = in ** (1 / gamma)``."""
    levels = np.arange(256, dtype=np.float64) / 255.0
    return np.clip(np.round((levels ** (1.0 / gamma)) * 255.0), 0, 255).astype(np.uint8)


class Display:
    """
    Preview window.

    ``is_visible`` turns False once the user closes the window or presses
    Esc/q. With ``enabled=False`` nothing is shown and the window always
    counts as visible.
    """

    def __init__(self, title: str = "Some Title", gamma: float = 1.0, enabled: bool = True):
        self.logger = get_logger("cvdemo.display")
        self.title = title
        self.gamma = gamma
        self.enabled = enabled
        self._lut: Optional[np.ndarray] = None if np.isclose(gamma, 1.0) else gamma_table(gamma)
        self._shown = False
        self._closed = False

    def correct(self, frame: np.ndarray) -> np.ndarray:
        if self._lut is None:
            return frame
        return cv2.LUT(frame, self._lut)

    def show(self, frame: np.ndarray) -> None:
        if not self.enabled:
            return
        cv2.imshow(self.title, self.correct(frame))
        self._shown = True

        key = cv2.waitKey(1) & 0xFF
        if key in QUIT_KEYS:
            self.logger.info("[Display] Quit key pressed")
            self._closed = True

    def is_visible(self) -> bool:
        if not self.enabled:
            return True
        if self._closed:
            return False
        # Nothing shown yet, so there is no window to have been closed
        if not self._shown:
            return True
        if cv2.getWindowProperty(self.title, cv2.WND_PROP_VISIBLE) < 1:
            self.logger.info("[Display] Window closed")
            self._closed = True
        return not self._closed

    def dispose(self) -> None:
        if self.enabled and self._shown:
            try:
                cv2.destroyWindow(self.title)
                cv2.waitKey(1)
            except cv2.error as e:
                # Already destroyed by the window manager
                self.logger.debug(f"[Display] destroyWindow: {e}")
        self._shown = False
        self._closed = True
