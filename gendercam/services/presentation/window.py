from typing import Optional, Sequence
import os
import logging

import cv2
import numpy as np

from gendercam.models import CandidateRegion, ClassificationResult
from .overlay import draw_detections

logger = logging.getLogger(__name__)


class WindowPresenter:
    """
    Shows annotated frames in an OpenCV window
    """

    def __init__(self, window_name: str = "Gender Detection"):
        self.window_name = window_name
        self.last_frame: Optional[np.ndarray] = None

    def render(self, frame: np.ndarray,
               candidates: Sequence[CandidateRegion],
               results: Sequence[ClassificationResult]) -> np.ndarray:
        self.last_frame = draw_detections(frame, candidates, results)
        cv2.imshow(self.window_name, self.last_frame)
        return self.last_frame

    def read_key(self, delay: int = 1) -> str:
        """Wait for a keystroke; returns '' when none was pressed"""
        key = cv2.waitKey(delay) & 0xFF
        if key == 0xFF:
            return ""
        return chr(key)

    def close(self):
        cv2.destroyAllWindows()


class FrameSaver:
    """Writes frames to numbered image files: captured_0.jpg, captured_1.jpg, ..."""

    def __init__(self, directory: str = ".", prefix: str = "captured_", extension: str = ".jpg"):
        self.directory = directory
        self.prefix = prefix
        self.extension = extension
        self.counter = 0

    def next_path(self) -> str:
        return os.path.join(self.directory, f"{self.prefix}{self.counter}{self.extension}")

    def save(self, frame: np.ndarray) -> Optional[str]:
        os.makedirs(self.directory, exist_ok=True)
        path = self.next_path()

        if not cv2.imwrite(path, frame):
            logger.error(f"Failed to write {path}")
            return None

        self.counter += 1
        logger.info(f"Saved frame: {path}")
        return path
