from .config import Settings, HeuristicConfig, DnnConfig, LOG_LEVELS
from .exceptions import GenderCamError, AnalyzerLoadError, FrameSourceError
from .logging import setup_logging

__all__ = [
    # Config
    'Settings', 'HeuristicConfig', 'DnnConfig', 'LOG_LEVELS',
    # Errors
    'GenderCamError', 'AnalyzerLoadError', 'FrameSourceError',
    # Logging
    'setup_logging'
]
