# Copyright (c) 2026 Huynh Huy. All rights reserved.

"""
cvdemo Utilities
================

Configuration and logging helpers.
"""

from cvdemo.utils.config import Config, load_config, save_config
from cvdemo.utils.logging import get_logger, log_runtime_info, setup_logging

__all__ = [
    "Config",
    "load_config",
    "save_config",
    "setup_logging",
    "get_logger",
    "log_runtime_info",
]
