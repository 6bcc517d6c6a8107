"""
Pytest Configuration and Fixtures
==================================
"""

from __future__ import annotations

from pathlib import Path

import cv2
import numpy as np
import pytest


class FakeGrabber:
    """In-memory frame source."""

    def __init__(self, frames: list[np.ndarray], gamma: float = 2.2):
        self.frames = list(frames)
        self.gamma = gamma
        self.started = False
        self.stopped = False
        self.grabs = 0

    def start(self):
        self.started = True
        return self

    def grab(self):
        self.grabs += 1
        if not self.frames:
            return None
        return self.frames.pop(0)

    def stop(self):
        self.stopped = True


class FakeDisplay:
    """Window that the 'user' closes after ``visible_for`` checks."""

    def __init__(self, visible_for: int | None = None):
        self.visible_for = visible_for
        self.checks = 0
        self.shown: list[np.ndarray] = []
        self.disposed = False

    def is_visible(self) -> bool:
        self.checks += 1
        return self.visible_for is None or self.checks <= self.visible_for

    def show(self, frame: np.ndarray) -> None:
        self.shown.append(frame)

    def dispose(self) -> None:
        self.disposed = True


class FakeRecorder:
    def __init__(self, width: int, height: int, path: Path = Path("output.avi")):
        self.width = width
        self.height = height
        self.path = path
        self.frames: list[np.ndarray] = []
        self.started = False
        self.stopped = False

    def start(self):
        self.started = True
        return self

    def record(self, frame: np.ndarray) -> None:
        assert frame.shape[:2] == (self.height, self.width)
        self.frames.append(frame)

    def stop(self) -> None:
        self.stopped = True


@pytest.fixture
def project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def cascade_path() -> Path:
    """Frontal face cascade bundled with opencv-python."""
    return Path(cv2.data.haarcascades) / "haarcascade_frontalface_alt.xml"


@pytest.fixture
def sample_frame() -> np.ndarray:
    """480x640 BGR frame: dark background with a bright square."""
    frame = np.full((480, 640, 3), 20, dtype=np.uint8)
    cv2.rectangle(frame, (200, 150), (400, 330), (220, 220, 220), -1)
    return frame


@pytest.fixture
def frame_stream(sample_frame) -> list[np.ndarray]:
    return [sample_frame.copy() for _ in range(6)]


@pytest.fixture
def mock_config(tmp_path: Path):
    """Headless configuration writing into a temporary directory."""
    from cvdemo.utils.config import Config

    config = Config()
    config.display.enabled = False
    config.recorder.path = str(tmp_path / "output.avi")
    config.classifier.cache_dir = str(tmp_path / "cache")
    config.warp.seed = 1234
    return config


@pytest.fixture
def fake_recorders():
    """Recorder factory that remembers what it built."""
    built: list[FakeRecorder] = []

    def factory(width: int, height: int) -> FakeRecorder:
        recorder = FakeRecorder(width, height)
        built.append(recorder)
        return recorder

    factory.built = built
    return factory


@pytest.fixture
def make_grabber():
    return FakeGrabber


@pytest.fixture
def make_display():
    return FakeDisplay
