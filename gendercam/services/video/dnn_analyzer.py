"""
Face and gender detection backed by OpenCV.

- Faces: Haar cascade (haarcascade_frontalface_default.xml)
- Gender: Caffe gender_net (227x227 input, Male/Female softmax)
"""

from typing import List, Optional, Tuple
import os
import logging

import cv2
import numpy as np

from gendercam.core.config import DnnConfig
from gendercam.core.exceptions import AnalyzerLoadError
from gendercam.models import CandidateRegion, ClassificationResult
from .analyzer import FaceGenderAnalyzer

logger = logging.getLogger(__name__)


class DnnAnalyzer(FaceGenderAnalyzer):
    """
    Haar cascade face detector with a pre-trained Caffe gender classifier.
    Cascade and network may be injected, otherwise both are loaded from config paths.
    """

    name = "dnn"

    @property
    def labels(self) -> Tuple[str, str]:
        return tuple(self.config.labels)

    def __init__(self, config: Optional[DnnConfig] = None, cascade=None, net=None):
        self.config = config or DnnConfig()
        self.cascade = cascade if cascade is not None else self._load_cascade(self.config.face_cascade_path)
        self.net = net if net is not None else self._load_gender_net(self.config.gender_proto, self.config.gender_model)
        logger.info("DNN analyzer initialized")

    @staticmethod
    def _load_cascade(path: str):
        if not os.path.exists(path):
            raise AnalyzerLoadError(
                f"Cascade file not found: {path}",
                user_message="Failed to load Haar cascade!",
            )

        cascade = cv2.CascadeClassifier()
        try:
            loaded = cascade.load(path)
        except cv2.error as e:
            raise AnalyzerLoadError(
                f"Cascade load error: {e}",
                user_message="Failed to load Haar cascade!",
            ) from e

        if not loaded:
            raise AnalyzerLoadError(
                f"Cascade file could not be parsed: {path}",
                user_message="Failed to load Haar cascade!",
            )

        logger.info(f"Loaded Haar cascade: {path}")
        return cascade

    @staticmethod
    def _load_gender_net(proto: str, model: str):
        for path in (proto, model):
            if not os.path.exists(path):
                raise AnalyzerLoadError(
                    f"Gender model file not found: {path}",
                    user_message="Failed to load gender model!",
                )

        try:
            net = cv2.dnn.readNetFromCaffe(proto, model)
        except cv2.error as e:
            raise AnalyzerLoadError(
                f"Caffe load error: {e}",
                user_message="Failed to load gender model!",
            ) from e

        if net.empty():
            raise AnalyzerLoadError(
                f"Gender network is empty: {model}",
                user_message="Failed to load gender model!",
            )

        logger.info(f"Loaded gender model: {model}")
        return net

    def locate(self, frame: np.ndarray) -> List[CandidateRegion]:
        gray = cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)
        faces = self.cascade.detectMultiScale(
            gray,
            scaleFactor=self.config.scale_factor,
            minNeighbors=self.config.min_neighbors,
        )
        return [CandidateRegion(int(x), int(y), int(w), int(h), 1.0) for (x, y, w, h) in faces]

    def preprocess(self, face: np.ndarray) -> np.ndarray:
        size = tuple(self.config.input_size)
        resized = cv2.resize(face, size)
        return cv2.dnn.blobFromImage(resized, 1.0, size, self.config.mean_values, swapRB=False)

    def classify_region(self, frame: np.ndarray, region: CandidateRegion) -> ClassificationResult:
        x, y, w, h = region.as_rect()
        face = frame[max(y, 0):y + h, max(x, 0):x + w]

        if face.size == 0:
            return ClassificationResult(self.config.labels[1], 0.5)

        self.net.setInput(self.preprocess(face))
        prob = np.asarray(self.net.forward()).reshape(-1)

        class_id = int(np.argmax(prob))
        confidence = float(prob[class_id])
        return ClassificationResult(self.config.labels[class_id], confidence)
