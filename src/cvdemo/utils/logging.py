"""Simple structured logging for the cvdemo pipeline."""

import logging
import sys
from pathlib import Path


def setup_logging(
    level: str = "INFO",
    log_file: str | None = None,
) -> logging.Logger:
    """Set up logging with console and optional file output.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR).
        log_file: Optional path to save logs to file.

    Returns:
        Configured logger instance.
    """
    logger = logging.getLogger("cvdemo")
    logger.setLevel(getattr(logging, level.upper()))

    # Clear existing handlers
    logger.handlers.clear()

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    # File handler (appends across runs)
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_path, mode="a")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    # Reduce noise from libraries
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    return logger


def get_logger(name: str = "cvdemo") -> logging.Logger:
    return logging.getLogger(name)


def video_backends() -> list[str]:
    """Names of the video I/O backends compiled into this OpenCV build."""
    import cv2

    registry = cv2.videoio_registry
    return [registry.getBackendName(api) for api in registry.getBackends()]


def log_runtime_info(logger: logging.Logger | None = None) -> None:
    """Log the OpenCV version and video backends; full build info at DEBUG."""
    import cv2
    import numpy as np

    logger = logger or get_logger()
    logger.info(f"OpenCV {cv2.__version__}, numpy {np.__version__}")
    logger.info(f"Video backends: {', '.join(video_backends()) or 'none'}")
    logger.debug(cv2.getBuildInformation())
