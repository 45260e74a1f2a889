from abc import ABC, abstractmethod
from typing import List, Tuple
import logging

import numpy as np

from gendercam.models import CandidateRegion, ClassificationResult

logger = logging.getLogger(__name__)


class FaceGenderAnalyzer(ABC):
    """
    Locates faces in a frame and assigns each one a gender label.

    Implementations are stateless between frames.
    """

    name = "base"

    @property
    @abstractmethod
    def labels(self) -> Tuple[str, str]:
        """(male_label, female_label) this analyzer emits"""

    @abstractmethod
    def locate(self, frame: np.ndarray) -> List[CandidateRegion]:
        """Propose face rectangles for a BGR frame"""

    @abstractmethod
    def classify_region(self, frame: np.ndarray, region: CandidateRegion) -> ClassificationResult:
        """Label a single candidate region"""

    def analyze(self, frame: np.ndarray) -> Tuple[List[CandidateRegion], List[ClassificationResult]]:
        """
        Run locate + classify on one frame
        Returns: (candidates, results) of equal length
        """
        if frame is None or frame.size == 0:
            return [], []

        candidates = self.locate(frame)
        results = [self.classify_region(frame, region) for region in candidates]

        logger.debug(f"[{self.name}] {len(candidates)} face(s) in {frame.shape[1]}x{frame.shape[0]} frame")
        return candidates, results


def create_analyzer(settings) -> FaceGenderAnalyzer:
    """Build the analyzer selected by settings.analyzer"""
    if settings.analyzer == "dnn":
        from .dnn_analyzer import DnnAnalyzer
        return DnnAnalyzer(settings.dnn_config())

    from .heuristic_analyzer import HeuristicAnalyzer
    return HeuristicAnalyzer(settings.heuristic_config())
