# Copyright (c) 2026 Huynh Huy. All rights reserved.

"""
cvdemo - OpenCV Face Detection Demo
===================================

A small sample application that strings OpenCV calls together in one loop.

Features:
    - Haar-cascade face detection, with the default model fetched on demand
    - Contour extraction and polygon approximation
    - A fixed random perspective warp of every frame
    - Live display and video recording of the result

Example:
    >>> from cvdemo import Demo, load_config
    >>> Demo(load_config()).run()

"""

__version__ = "1.0.0"
__author__ = "cvdemo Team"

from cvdemo.utils.config import Config, load_config
from cvdemo.utils.logging import setup_logging
from cvdemo.app.demo import Demo, DemoStats

__all__ = [
    "__version__",
    "Config",
    "load_config",
    "setup_logging",
    "Demo",
    "DemoStats",
]
