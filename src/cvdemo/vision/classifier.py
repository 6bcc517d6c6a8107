# Copyright (c) 2026 Huynh Huy. All rights reserved.

"""
Cascade Classifier Loading
==========================

Resolves the face-detection model path and loads it into OpenCV.

When no path is given, the stock OpenCV frontal-face cascade is downloaded
once and kept in a local cache directory.
"""

from pathlib import Path
from urllib.parse import urlparse

import cv2
import requests

from cvdemo.exceptions import ClassifierDownloadError, ClassifierLoadError
from cvdemo.utils.config import DEFAULT_CLASSIFIER_URL
from cvdemo.utils.logging import get_logger

logger = get_logger("cvdemo.classifier")

CHUNK_SIZE = 8192


def cached_model_path(url: str, cache_dir: str | Path) -> Path:
    """Where the model fetched from ``url`` lives inside ``cache_dir``."""
    name = Path(urlparse(url).path).name or "classifier.xml"
    return Path(cache_dir).expanduser() / name


def download_model(url: str, dest: Path, timeout: float = 60.0) -> Path:
    """Stream ``url`` into ``dest``.

    The body goes to ``dest.part`` first and is renamed only once complete.
    """
    dest.parent.mkdir(parents=True, exist_ok=True)
    partial = dest.with_name(dest.name + ".part")

    logger.info(f"Downloading classifier from {url}")
    try:
        with requests.get(url, stream=True, timeout=timeout) as r:
            r.raise_for_status()
            with open(partial, "wb") as f:
                for chunk in r.iter_content(chunk_size=CHUNK_SIZE):
                    if chunk:
                        f.write(chunk)
    except requests.RequestException as e:
        partial.unlink(missing_ok=True)
        raise ClassifierDownloadError(f"Could not download {url}: {e}") from e

    partial.replace(dest)
    logger.info(f"Cached classifier at {dest}")
    return dest


def resolve_classifier_path(
    path: str | Path | None,
    cache_dir: str | Path = "~/.cache/cvdemo",
    url: str = DEFAULT_CLASSIFIER_URL,
    timeout: float = 60.0,
) -> Path:
    """Return the model path to load, fetching the default model if needed.

    Args:
        path: Explicit model file. Returned unchanged when given.
        cache_dir: Directory the default model is cached in.
        url: Where to fetch the default model from.
        timeout: Network timeout in seconds.

    Returns:
        Path to a cascade XML file.
    """
    if path is not None:
        return Path(path)

    cached = cached_model_path(url, cache_dir)
    if cached.exists():
        logger.debug(f"Using cached classifier {cached}")
        return cached

    return download_model(url, cached, timeout=timeout)


def load_classifier(path: str | Path) -> cv2.CascadeClassifier:
    path = Path(path)
    if not path.is_file():
        raise ClassifierLoadError(f"Classifier file not found: {path}")

    classifier = cv2.CascadeClassifier()
    try:
        loaded = classifier.load(str(path))
    except cv2.error as e:
        raise ClassifierLoadError(f"Could not parse cascade {path}: {e}") from e
    if not loaded or classifier.empty():
        raise ClassifierLoadError(f"Could not load cascade from {path}")

    logger.info(f"Loaded classifier {path}")
    return classifier
