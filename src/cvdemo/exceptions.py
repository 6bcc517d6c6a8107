# Copyright (c) 2026 Huynh Huy. All rights reserved.

"""Exceptions raised by cvdemo. None of them are retried."""


class CVDemoError(Exception):
    """Base class for every cvdemo failure."""


class ClassifierError(CVDemoError):
    pass


class ClassifierDownloadError(ClassifierError):
    """The default cascade model could not be fetched."""


class ClassifierLoadError(ClassifierError):
    """OpenCV could not load the cascade model file."""


class CaptureError(CVDemoError):
    """The frame source could not be opened."""


class RecorderError(CVDemoError):
    """The video sink could not be opened or rejected a frame."""
