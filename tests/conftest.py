import numpy as np
import pytest

from gendercam.core.config import HeuristicConfig
from gendercam.services.video.heuristic_analyzer import HeuristicAnalyzer

from helpers import make_noisy_skin


@pytest.fixture
def analyzer():
    return HeuristicAnalyzer(HeuristicConfig())


@pytest.fixture
def noisy_block_frame():
    """200x200 black frame with a 100x100 noisy skin block at (50, 50)"""
    frame = np.zeros((200, 200, 3), dtype=np.uint8)
    frame[50:150, 50:150] = make_noisy_skin(100, 100)
    return frame
