from .analyzer import FaceGenderAnalyzer, create_analyzer
from .heuristic_analyzer import HeuristicAnalyzer
from .dnn_analyzer import DnnAnalyzer
from .frame_source import FrameSource, CameraSource, SyntheticSource, ImageFileSource
from .processor import FrameProcessor

__all__ = [
    'FaceGenderAnalyzer', 'create_analyzer',
    'HeuristicAnalyzer', 'DnnAnalyzer',
    'FrameSource', 'CameraSource', 'SyntheticSource', 'ImageFileSource',
    'FrameProcessor'
]
