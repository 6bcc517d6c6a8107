# Copyright (c) 2026 Huynh Huy. All rights reserved.

"""
Frame Grabber and Recorder
==========================

Thin wrappers over ``cv2.VideoCapture`` and ``cv2.VideoWriter`` with an
explicit start/stop lifecycle.
"""

from pathlib import Path
from typing import Optional

import cv2
import numpy as np

from cvdemo.exceptions import CaptureError, RecorderError
from cvdemo.utils import get_logger


def parse_source(source: int | str) -> int | str:
    """Camera index for all-digit strings, otherwise the path/URL unchanged."""
    if isinstance(source, str) and source.strip().isdigit():
        return int(source)
    return source


class FrameGrabber:
    """Reads frames from a camera index or a video file/stream."""

    def __init__(
        self,
        source: int | str = 0,
        width: Optional[int] = None,
        height: Optional[int] = None,
        gamma: float = 2.2,
    ):
        self.logger = get_logger("cvdemo.grabber")
        self.source = parse_source(source)
        self.width = width
        self.height = height
        self.gamma = gamma
        self._cap: Optional[cv2.VideoCapture] = None

    def start(self) -> "FrameGrabber":
        cap = cv2.VideoCapture(self.source)
        if not cap.isOpened():
            cap.release()
            raise CaptureError(f"Could not open frame source {self.source!r}")

        if self.width:
            cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.width)
        if self.height:
            cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.height)

        self._cap = cap
        self.logger.info(f"[Grabber] Opened source {self.source!r}")
        return self

    @property
    def started(self) -> bool:
        return self._cap is not None

    def grab(self) -> Optional[np.ndarray]:
        """Block until the next frame; ``None`` once the stream is exhausted."""
        if self._cap is None:
            raise CaptureError("Frame grabber is not started")
        ret, frame = self._cap.read()
        if not ret:
            return None
        return frame

    def stop(self) -> None:
        if self._cap is not None:
            self._cap.release()
            self._cap = None
            self.logger.info("[Grabber] Released")

    def __enter__(self) -> "FrameGrabber":
        return self.start()

    def __exit__(self, *exc) -> None:
        self.stop()


class FrameRecorder:
    """Writes fixed-size BGR frames to a video file."""

    def __init__(
        self,
        path: str | Path,
        width: int,
        height: int,
        fps: float = 30.0,
        fourcc: str = "MJPG",
    ):
        self.logger = get_logger("cvdemo.recorder")
        self.path = Path(path)
        self.width = width
        self.height = height
        self.fps = fps
        self.fourcc = fourcc
        self.frames_written = 0
        self._writer: Optional[cv2.VideoWriter] = None

    def start(self) -> "FrameRecorder":
        self.path.parent.mkdir(parents=True, exist_ok=True)
        writer = cv2.VideoWriter(
            str(self.path),
            cv2.VideoWriter_fourcc(*self.fourcc),
            self.fps,
            (self.width, self.height),
        )
        if not writer.isOpened():
            writer.release()
            raise RecorderError(f"Could not open video writer for {self.path} ({self.fourcc})")

        self._writer = writer
        self.logger.info(
            f"[Recorder] Started: {self.path} {self.width}x{self.height} @ {self.fps} FPS"
        )
        return self

    def record(self, frame: np.ndarray) -> None:
        if self._writer is None:
            raise RecorderError("Frame recorder is not started")

        height, width = frame.shape[:2]
        if (width, height) != (self.width, self.height):
            raise RecorderError(
                f"Frame size {width}x{height} does not match recorder size "
                f"{self.width}x{self.height}"
            )

        self._writer.write(frame)
        self.frames_written += 1

    def stop(self) -> None:
        if self._writer is not None:
            self._writer.release()
            self._writer = None
            self.logger.info(f"[Recorder] Done, wrote {self.frames_written} frames")

    def __enter__(self) -> "FrameRecorder":
        return self.start()

    def __exit__(self, *exc) -> None:
        self.stop()
