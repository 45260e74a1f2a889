from typing import Callable
import logging

from gendercam.core.exceptions import FrameSourceError
from gendercam.services.video import FrameProcessor, FrameSource, ImageFileSource

logger = logging.getLogger(__name__)

MENU = """
=== Face & Gender Detection ===
1. Capture from camera
2. Load from file
3. Exit"""


def run_menu(source: FrameSource, processor: FrameProcessor,
             input_func: Callable[[str], str] = input) -> int:
    """Numbered text menu; per-request failures print a message and loop"""
    try:
        while True:
            print(MENU)
            try:
                choice = input_func("Choose an option: ").strip()
            except EOFError:
                break

            if choice == "1":
                frame = source.read()
                if frame is None:
                    print("Failed to capture frame.")
                    continue
                processor.process(frame)

            elif choice == "2":
                try:
                    path = input_func("Image path: ").strip()
                except EOFError:
                    break
                try:
                    frame = ImageFileSource(path).read()
                except FrameSourceError as e:
                    logger.warning(e.message)
                    print(e.user_message)
                    continue
                processor.process(frame)

            elif choice == "3":
                print("Goodbye.")
                break

            else:
                print(f"Invalid option: {choice!r}")
    finally:
        source.release()

    return 0
