import logging

from gendercam.services.video import FrameProcessor, FrameSource
from gendercam.services.presentation import FrameSaver, WindowPresenter

logger = logging.getLogger(__name__)


def run_live(source: FrameSource, processor: FrameProcessor,
             presenter: WindowPresenter, saver: FrameSaver) -> int:
    """
    Keyboard-driven display loop: 'q' quits, 's' saves the annotated frame.
    Stops when the source returns an empty frame.
    """
    print("Press 's' to save image, 'q' to quit.")

    try:
        while True:
            frame = source.read()
            if frame is None:
                logger.info("No frame from source, stopping")
                break

            annotated, _ = processor.process(frame)

            key = presenter.read_key(1)
            if key == "q":
                break

            if key == "s":
                path = saver.save(annotated if annotated is not None else frame)
                if path:
                    print(f"Saved {path}")
    finally:
        source.release()
        presenter.close()

    logger.info(f"Live session ended: {processor.get_stats()}")
    return 0
