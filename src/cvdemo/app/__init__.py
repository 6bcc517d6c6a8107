# Copyright (c) 2026 Huynh Huy. All rights reserved.

"""cvdemo Application Module."""

from cvdemo.app.capture import FrameGrabber, FrameRecorder
from cvdemo.app.display import Display
from cvdemo.app.demo import Demo, DemoStats

__all__ = [
    "FrameGrabber",
    "FrameRecorder",
    "Display",
    "Demo",
    "DemoStats",
]
