"""
Heuristic face and gender detection using plain pixel statistics.

Pipeline per frame:
- Face locator: 60x60 sliding window, skin-color fraction, aspect and variance filters
- Feature scorer: brightness, intensity variance, edge density, skin-tone ratio
- Classifier: additive rule-based score

No learned model is involved. The classifier thresholds are unvalidated folk
heuristics and are not authoritative.
"""

from typing import List, Optional, Sequence, Tuple
import logging

import numpy as np

from gendercam.core.config import HeuristicConfig
from gendercam.models import CandidateRegion, ClassificationResult, FeatureVector
from .analyzer import FaceGenderAnalyzer

logger = logging.getLogger(__name__)


def split_channels(frame: np.ndarray):
    """Return (r, g, b) as int32 planes from a BGR frame"""
    pixels = frame.astype(np.int32)
    return pixels[:, :, 2], pixels[:, :, 1], pixels[:, :, 0]


def intensity(frame: np.ndarray) -> np.ndarray:
    """Per-pixel (R+G+B)/3 as float64"""
    return frame.astype(np.float64).sum(axis=2) / 3.0


class HeuristicAnalyzer(FaceGenderAnalyzer):
    """Skin-color face locator with rule-based gender scoring."""

    name = "heuristic"

    @property
    def labels(self) -> Tuple[str, str]:
        return tuple(self.config.labels)

    def __init__(self, config: Optional[HeuristicConfig] = None):
        self.config = config or HeuristicConfig()
        logger.info(f"Heuristic analyzer initialized (window {self.config.window_size}px, step {self.config.window_step}px)")

    # Face locator

    def skin_mask(self, frame: np.ndarray) -> np.ndarray:
        cfg = self.config
        r, g, b = split_channels(frame)
        return (
            (r > cfg.skin_min_red) & (g > cfg.skin_min_green) & (b > cfg.skin_min_blue)
            & (r > g) & (r > b)
            & ((r - g) > cfg.skin_min_red_green_gap)
        )

    def locate(self, frame: np.ndarray) -> List[CandidateRegion]:
        cfg = self.config
        height, width = frame.shape[:2]
        win, step = cfg.window_size, cfg.window_step

        if height < win or width < win:
            return []

        skin = self.skin_mask(frame)
        gray = intensity(frame)

        candidates = []
        for y in range(0, height - win + 1, step):
            for x in range(0, width - win + 1, step):
                fraction = float(skin[y:y + win, x:x + win].mean())
                if fraction <= cfg.min_skin_fraction:
                    continue

                region = CandidateRegion(x, y, win, win, fraction)
                if not self._passes_filters(gray, region):
                    continue

                candidates.append(region)

        return candidates

    def _passes_filters(self, gray: np.ndarray, region: CandidateRegion) -> bool:
        cfg = self.config

        aspect = region.aspect_ratio
        if aspect < cfg.min_aspect_ratio or aspect > cfg.max_aspect_ratio:
            return False

        # Near-uniform patches are not faces
        patch = gray[region.y:region.y + region.height, region.x:region.x + region.width]
        return float(patch.var()) > cfg.min_variance

    # Feature scorer

    def extract_features(self, frame: np.ndarray, region: CandidateRegion) -> FeatureVector:
        x, y = max(region.x, 0), max(region.y, 0)
        crop = frame[y:region.y + region.height, x:region.x + region.width]

        if crop.size == 0:
            return FeatureVector(0.0, 0.0, 0.0, 0.0)

        gray = intensity(crop)
        brightness = float(gray.mean())
        variance = float(gray.var())

        return FeatureVector(
            brightness=brightness,
            variance=variance,
            edge_density=self._edge_density(gray),
            skin_tone_ratio=self._skin_tone_ratio(crop),
        )

    def _edge_density(self, gray: np.ndarray) -> float:
        # Last row and column have no right/lower neighbour
        if gray.shape[0] < 2 or gray.shape[1] < 2:
            return 0.0

        center = gray[:-1, :-1]
        dx = np.abs(gray[:-1, 1:] - center)
        dy = np.abs(gray[1:, :-1] - center)
        edges = (dx + dy) > self.config.edge_threshold
        return float(edges.mean())

    @staticmethod
    def _skin_tone_ratio(crop: np.ndarray) -> float:
        r, g, b = split_channels(crop)
        mean_r, mean_g, mean_b = float(r.mean()), float(g.mean()), float(b.mean())
        total = mean_r + mean_g + mean_b
        if total == 0:
            return 0.0
        return (mean_r - mean_g) / total

    # Classifier

    def classify(self, features: Sequence[float]) -> ClassificationResult:
        cfg = self.config
        male_label, female_label = cfg.labels

        if len(features) != 4:
            logger.debug(f"Expected 4 features, got {len(features)}")
            return ClassificationResult(female_label, 0.5)

        brightness, variance, edge_density, skin_ratio = features

        score = cfg.base_score
        if brightness > cfg.brightness_threshold:
            score += cfg.brightness_weight
        if variance > cfg.variance_threshold:
            score += cfg.variance_weight
        if edge_density > cfg.edge_density_threshold:
            score += cfg.edge_density_weight
        if skin_ratio > cfg.skin_ratio_threshold:
            score += cfg.skin_ratio_weight

        score = min(1.0, max(0.0, score))

        if score > 0.5:
            return ClassificationResult(male_label, score)
        return ClassificationResult(female_label, 1.0 - score)

    def classify_region(self, frame: np.ndarray, region: CandidateRegion) -> ClassificationResult:
        return self.classify(self.extract_features(frame, region))
