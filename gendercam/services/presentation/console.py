from typing import Sequence, TextIO
import sys

import numpy as np

from gendercam.models import CandidateRegion, ClassificationResult


def format_report(candidates: Sequence[CandidateRegion],
                  results: Sequence[ClassificationResult]) -> str:
    """Render a per-face text block for the console"""
    pairs = list(zip(candidates, results))

    if not pairs:
        return "No faces detected."

    lines = [f"Detected {len(pairs)} face(s):"]
    for i, (region, result) in enumerate(pairs, start=1):
        lines.append(f"Face {i}:")
        lines.append(f"  Position:   ({region.x}, {region.y})")
        lines.append(f"  Size:       {region.width}x{region.height}")
        lines.append(f"  Gender:     {result.label}")
        lines.append(f"  Confidence: {result.percent:.1f}%")

    return "\n".join(lines)


class ConsolePresenter:
    """Prints detection reports to a text stream"""

    def __init__(self, stream: TextIO = None):
        self.stream = stream or sys.stdout

    def render(self, frame: np.ndarray,
               candidates: Sequence[CandidateRegion],
               results: Sequence[ClassificationResult]) -> str:
        report = format_report(candidates, results)
        height, width = frame.shape[:2]

        print("=" * 40, file=self.stream)
        print(f"Frame {width}x{height}", file=self.stream)
        print(report, file=self.stream)
        print("=" * 40, file=self.stream)
        return report

    def close(self):
        self.stream.flush()
