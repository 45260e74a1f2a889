"""
Exception hierarchy for gendercam.

Every error carries a user-facing message that the CLI prints verbatim.
"""

from typing import Optional


class GenderCamError(Exception):
    """Base exception for all gendercam errors."""

    def __init__(self, message: str, user_message: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message


class AnalyzerLoadError(GenderCamError):
    """Raised when a detector or classifier model cannot be loaded."""
    pass


class FrameSourceError(GenderCamError):
    """Raised when a frame source cannot be opened or read."""
    pass
