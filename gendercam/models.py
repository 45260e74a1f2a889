from dataclasses import dataclass
from typing import NamedTuple, Tuple


@dataclass(frozen=True)
class CandidateRegion:
    """Axis-aligned rectangle proposed as a possible face"""
    x: int
    y: int
    width: int
    height: int
    confidence: float = 1.0

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height if self.height > 0 else 0.0

    def as_rect(self) -> Tuple[int, int, int, int]:
        return self.x, self.y, self.width, self.height


class FeatureVector(NamedTuple):
    """Region statistics consumed by the rule-based classifier"""
    brightness: float
    variance: float
    edge_density: float
    skin_tone_ratio: float


@dataclass(frozen=True)
class ClassificationResult:
    label: str
    confidence: float

    @property
    def percent(self) -> float:
        return round(self.confidence * 100, 1)
