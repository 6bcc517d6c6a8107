# Copyright (c) 2026 Huynh Huy. All rights reserved.

"""
cvdemo Driver Loop
==================

Grabs frames, detects faces, draws contours, warps, displays and records,
until the preview window is closed or the source runs out of frames.

Per frame:
    1. BGR -> grayscale
    2. Face detection on the grayscale image, boxes and hats drawn on the frame
    3. Threshold + contours of the grayscale image, polygons drawn on the frame
    4. Fixed random perspective warp of the annotated frame
    5. Display and record of the warped frame
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

import cv2
import numpy as np

from cvdemo.app.capture import FrameGrabber, FrameRecorder
from cvdemo.app.display import Display
from cvdemo.exceptions import CaptureError
from cvdemo.utils import Config, get_logger
from cvdemo.vision.classifier import load_classifier, resolve_classifier_path
from cvdemo.vision.contours import draw_contours
from cvdemo.vision.detection import FaceDetector
from cvdemo.vision.warp import random_rotation, warp_frame


@dataclass
class DemoStats:
    frames: int = 0
    faces: int = 0
    contours: int = 0
    elapsed: float = 0.0
    output: Optional[Path] = None

    @property
    def fps(self) -> float:
        return self.frames / self.elapsed if self.elapsed > 0 else 0.0


class Demo:
    """Single-threaded capture/annotate/warp/record loop."""

    def __init__(
        self,
        config: Config,
        classifier_path: Optional[str] = None,
        grabber: Optional[FrameGrabber] = None,
        display: Optional[Display] = None,
        recorder_factory: Optional[Callable[[int, int], FrameRecorder]] = None,
    ):
        """
        Args:
            config: Validated configuration.
            classifier_path: Cascade model file; the default model is fetched
                and cached when omitted.
            grabber: Frame source, built from ``config.camera`` when omitted.
            display: Preview window, built from ``config.display`` when omitted.
            recorder_factory: ``(width, height) -> FrameRecorder``, built from
                ``config.recorder`` when omitted.
        """
        self.logger = get_logger("cvdemo.demo")
        self.config = config
        self.classifier_path = classifier_path

        self.grabber = grabber or FrameGrabber(
            config.camera.source,
            width=config.camera.width,
            height=config.camera.height,
            gamma=config.camera.gamma,
        )
        self._display = display
        self._recorder_factory = recorder_factory or self._default_recorder

        self.detector: Optional[FaceDetector] = None
        self.rotation: Optional[np.ndarray] = None

    def _default_recorder(self, width: int, height: int) -> FrameRecorder:
        rec = self.config.recorder
        return FrameRecorder(rec.path, width, height, fps=rec.fps, fourcc=rec.fourcc)

    def _make_display(self) -> Display:
        if self._display is not None:
            return self._display
        gamma = self.config.display.gamma / self.grabber.gamma
        return Display(self.config.display.title, gamma=gamma, enabled=self.config.display.enabled)

    def _load_detector(self) -> FaceDetector:
        cls_cfg = self.config.classifier
        path = resolve_classifier_path(
            self.classifier_path,
            cache_dir=cls_cfg.cache_dir,
            url=cls_cfg.url,
            timeout=cls_cfg.timeout,
        )
        return FaceDetector.from_config(load_classifier(path), cls_cfg)

    def process(self, frame: np.ndarray) -> tuple[np.ndarray, int, int]:
        """Annotate ``frame`` in place and return its warped copy.

        Returns:
            (warped frame, faces found, contours found)
        """
        gray = cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)
        faces = self.detector.annotate(frame, gray)

        cnt = self.config.contours
        polygons = draw_contours(
            frame,
            gray,
            threshold=cnt.threshold,
            max_value=cnt.max_value,
            epsilon_ratio=cnt.epsilon_ratio,
        )

        return warp_frame(frame, self.rotation), len(faces), len(polygons)

    def run(self) -> DemoStats:
        self.detector = self._load_detector()
        stats = DemoStats()

        display: Optional[Display] = None
        recorder: Optional[FrameRecorder] = None
        self.grabber.start()
        try:
            frame = self.grabber.grab()
            if frame is None:
                raise CaptureError("Frame source produced no frames")
            height, width = frame.shape[:2]
            self.logger.info(f"Frame size: {width}x{height}")

            recorder = self._recorder_factory(width, height)
            recorder.start()
            stats.output = recorder.path

            display = self._make_display()

            seed = self.config.warp.seed
            rng = np.random.default_rng(seed)
            self.rotation = random_rotation(width, height, spread=self.config.warp.spread, rng=rng)
            self.logger.info(f"Random rotation:\n{np.array2string(self.rotation, precision=6)}")

            max_frames = self.config.run.max_frames
            start = time.perf_counter()
            # First frame only sizes the pipeline
            while display.is_visible():
                frame = self.grabber.grab()
                if frame is None:
                    break
                warped, n_faces, n_contours = self.process(frame)
                display.show(warped)
                recorder.record(warped)

                stats.frames += 1
                stats.faces += n_faces
                stats.contours += n_contours
                if max_frames is not None and stats.frames >= max_frames:
                    self.logger.info(f"Reached max_frames={max_frames}")
                    break
            stats.elapsed = time.perf_counter() - start
        finally:
            if display is not None:
                display.dispose()
            if recorder is not None:
                recorder.stop()
            self.grabber.stop()

        self.logger.info(
            f"Processed {stats.frames} frames ({stats.fps:.1f} FPS), "
            f"{stats.faces} faces, {stats.contours} contours -> {stats.output}"
        )
        return stats
