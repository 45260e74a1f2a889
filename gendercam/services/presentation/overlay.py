from typing import Sequence, Tuple

import cv2
import numpy as np

from gendercam.models import CandidateRegion, ClassificationResult

BOX_COLOR: Tuple[int, int, int] = (0, 255, 0)
LABEL_COLOR: Tuple[int, int, int] = (255, 0, 255)


def draw_detections(frame: np.ndarray,
                    candidates: Sequence[CandidateRegion],
                    results: Sequence[ClassificationResult]) -> np.ndarray:
    """Draw face boxes and gender labels on a copy of the frame"""
    annotated = frame.copy()

    for region, result in zip(candidates, results):
        x, y, w, h = region.as_rect()
        cv2.rectangle(annotated, (x, y), (x + w, y + h), BOX_COLOR, 2)
        cv2.putText(annotated, result.label, (x, y - 10),
                    cv2.FONT_HERSHEY_SIMPLEX, 0.8, LABEL_COLOR, 2)

    return annotated
