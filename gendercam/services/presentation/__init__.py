from .overlay import draw_detections
from .window import WindowPresenter, FrameSaver
from .console import ConsolePresenter, format_report

__all__ = [
    'draw_detections', 'WindowPresenter', 'FrameSaver',
    'ConsolePresenter', 'format_report'
]
