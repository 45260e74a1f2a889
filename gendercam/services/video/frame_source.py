from abc import ABC, abstractmethod
from typing import Optional
import os
import logging

import cv2
import numpy as np
from PIL import Image, UnidentifiedImageError

from gendercam.core.exceptions import FrameSourceError

logger = logging.getLogger(__name__)


class FrameSource(ABC):
    """Produces one BGR frame per read(); None means no frame available"""

    @abstractmethod
    def read(self) -> Optional[np.ndarray]:
        """Return the next frame or None"""

    def release(self):
        pass


class CameraSource(FrameSource):
    """
    Webcam, video file or stream read through cv2.VideoCapture
    """

    def __init__(self, source: str = "0"):
        self.source = source
        self.cap: Optional[cv2.VideoCapture] = None

    def connect(self) -> bool:
        """Open the capture device"""
        try:
            if self.cap is not None:
                self.cap.release()

            source = self.source
            if source.isdigit():
                source = int(source)

            self.cap = cv2.VideoCapture(source)

            if not self.cap.isOpened():
                logger.error(f"Failed to open camera: {self.source}")
                return False

            logger.info(f"Camera opened: {self.source}")
            return True
        except Exception as e:
            logger.error(f"Camera connection error: {e}")
            return False

    @property
    def is_open(self) -> bool:
        return self.cap is not None and self.cap.isOpened()

    def read(self) -> Optional[np.ndarray]:
        if not self.is_open:
            return None

        ret, frame = self.cap.read()
        if not ret or frame is None or frame.size == 0:
            return None
        return frame

    def release(self):
        if self.cap:
            self.cap.release()
            self.cap = None
        logger.info(f"Camera released: {self.source}")


class SyntheticSource(FrameSource):
    """
    Deterministic test pattern: grey backdrop with a textured skin-toned face
    """

    def __init__(self, width: int = 640, height: int = 480, seed: int = 0):
        self.width = width
        self.height = height
        self.seed = seed

    def read(self) -> Optional[np.ndarray]:
        rng = np.random.default_rng(self.seed)
        frame = np.full((self.height, self.width, 3), 90, dtype=np.uint8)

        cx, cy = self.width // 2, self.height // 2
        axes = (max(self.width // 8, 1), max(self.height // 5, 1))

        mask = np.zeros((self.height, self.width), dtype=np.uint8)
        cv2.ellipse(mask, (cx, cy), axes, 0, 0, 360, 255, -1)

        # Per-pixel offset shared by all channels keeps the skin rule satisfied
        noise = rng.integers(-25, 26, size=(self.height, self.width), dtype=np.int16)
        skin = np.empty_like(frame, dtype=np.int16)
        skin[:, :, 0] = 100 + noise  # B
        skin[:, :, 1] = 130 + noise  # G
        skin[:, :, 2] = 200 + noise  # R
        face = mask > 0
        frame[face] = np.clip(skin[face], 0, 255).astype(np.uint8)

        # Eyes and mouth
        ex, ey = axes[0] // 2, axes[1] // 3
        cv2.circle(frame, (cx - ex, cy - ey), max(axes[0] // 6, 1), (40, 40, 60), -1)
        cv2.circle(frame, (cx + ex, cy - ey), max(axes[0] // 6, 1), (40, 40, 60), -1)
        cv2.ellipse(frame, (cx, cy + axes[1] // 2), (max(axes[0] // 3, 1), max(axes[1] // 10, 1)),
                    0, 0, 360, (60, 50, 140), -1)

        return frame


class ImageFileSource(FrameSource):
    """Single still image loaded with Pillow"""

    def __init__(self, path: str):
        self.path = path

    def read(self) -> Optional[np.ndarray]:
        if not os.path.isfile(self.path):
            raise FrameSourceError(
                f"Image not found: {self.path}",
                user_message=f"File not found: {self.path}",
            )

        try:
            with Image.open(self.path) as image:
                rgb = np.array(image.convert("RGB"))
        except (UnidentifiedImageError, OSError) as e:
            raise FrameSourceError(
                f"Unreadable image {self.path}: {e}",
                user_message=f"Could not read image: {self.path}",
            ) from e

        logger.info(f"Loaded image {self.path} ({rgb.shape[1]}x{rgb.shape[0]})")
        return cv2.cvtColor(rgb, cv2.COLOR_RGB2BGR)
