"""Face detection with binary gender guessing for webcam and image frames."""

__version__ = "0.1.0"
