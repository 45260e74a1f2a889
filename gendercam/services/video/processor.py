from typing import Dict, List, Optional, Tuple
import logging

import numpy as np

from gendercam.models import CandidateRegion, ClassificationResult
from .analyzer import FaceGenderAnalyzer

logger = logging.getLogger(__name__)


class FrameProcessor:
    """
    Runs one frame through locate -> classify -> present
    """

    def __init__(self, analyzer: FaceGenderAnalyzer, presenter=None):
        self.analyzer = analyzer
        self.presenter = presenter

        self.frames_processed = 0
        self.totals = {"faces": 0, "male": 0, "female": 0, "other": 0}
        self.last_candidates: List[CandidateRegion] = []
        self.last_results: List[ClassificationResult] = []

    def process(self, frame: np.ndarray) -> Tuple[Optional[np.ndarray], Dict]:
        """
        Process a single frame
        Returns: (rendered_frame_or_report, stats_dict)
        """
        candidates, results = self.analyzer.analyze(frame)
        self.last_candidates, self.last_results = candidates, results

        stats = self._count(results)
        self.frames_processed += 1
        for key, value in stats.items():
            self.totals[key] += value

        rendered = None
        if self.presenter is not None:
            rendered = self.presenter.render(frame, candidates, results)

        logger.debug(f"Frame {self.frames_processed}: {stats}")
        return rendered, stats

    def _count(self, results: List[ClassificationResult]) -> Dict:
        male_label, female_label = self.analyzer.labels
        stats = {"faces": len(results), "male": 0, "female": 0, "other": 0}

        for result in results:
            if result.label == male_label:
                stats["male"] += 1
            elif result.label == female_label:
                stats["female"] += 1
            else:
                stats["other"] += 1

        return stats

    def get_stats(self) -> Dict:
        return {"frames": self.frames_processed, **self.totals}

    def reset(self):
        self.frames_processed = 0
        self.totals = {"faces": 0, "male": 0, "female": 0, "other": 0}
        self.last_candidates = []
        self.last_results = []
