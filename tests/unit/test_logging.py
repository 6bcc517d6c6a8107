# Copyright (c) 2026 Huynh Huy. All rights reserved.

"""
Tests for Logging Setup
=======================
"""

import logging


class TestLogging:

    def test_level_and_handlers(self):
        from cvdemo.utils.logging import setup_logging

        logger = setup_logging(level="debug")

        assert logger.name == "cvdemo"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path):
        from cvdemo.utils.logging import get_logger, setup_logging

        log_file = tmp_path / "logs" / "cvdemo.log"
        logger = setup_logging(level="INFO", log_file=str(log_file))

        get_logger("cvdemo.test").info("hello from the loop")
        for handler in logger.handlers:
            handler.flush()

        assert "hello from the loop" in log_file.read_text()
        assert len(logger.handlers) == 2

        # Re-running setup replaces handlers instead of stacking them
        setup_logging(level="INFO")
        assert len(logger.handlers) == 1

    def test_video_backends(self):
        from cvdemo.utils.logging import video_backends

        backends = video_backends()
        assert isinstance(backends, list)
        assert all(isinstance(name, str) for name in backends)

    def test_runtime_info(self, caplog):
        import cv2

        from cvdemo.utils.logging import get_logger, log_runtime_info

        logger = get_logger("cvdemo.runtime")
        with caplog.at_level(logging.INFO, logger="cvdemo.runtime"):
            log_runtime_info(logger)

        assert f"OpenCV {cv2.__version__}" in caplog.text
        assert "Video backends:" in caplog.text
