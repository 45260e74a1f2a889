"""Command line entry point: ``gendercam live|console|analyze``."""

import argparse
import logging
import sys
from typing import List, Optional

from pydantic import ValidationError

from gendercam.core import Settings, GenderCamError, FrameSourceError, setup_logging
from gendercam.cli import run_live, run_menu
from gendercam.services.video import (
    CameraSource, SyntheticSource, ImageFileSource, FrameProcessor, create_analyzer
)
from gendercam.services.presentation import WindowPresenter, ConsolePresenter, FrameSaver

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gendercam",
        description="Face detection with binary gender guessing",
    )
    parser.add_argument(
        "--analyzer",
        choices=["heuristic", "dnn"],
        default=None,
        help="Detection backend (default: from settings)",
    )
    parser.add_argument(
        "--source",
        default=None,
        help="Camera index or video URL (default: from settings)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )
    sub = parser.add_subparsers(dest="command")

    live_p = sub.add_parser("live", help="Show detections in a window")
    live_p.add_argument(
        "--synthetic",
        action="store_true",
        help="Use the synthetic test pattern instead of a camera",
    )
    live_p.add_argument(
        "--save-dir",
        default=None,
        help="Directory for saved frames",
    )

    sub.add_parser("console", help="Interactive text menu")

    analyze_p = sub.add_parser("analyze", help="Print a report for one image file")
    analyze_p.add_argument("image", help="Path to an image file")

    return parser


def _settings_from_args(args: argparse.Namespace) -> Settings:
    overrides = {
        "analyzer": args.analyzer,
        "camera_source": args.source,
        "save_dir": getattr(args, "save_dir", None),
        "log_level": "DEBUG" if args.verbose else None,
    }
    return Settings(**{k: v for k, v in overrides.items() if v is not None})


def _describe(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc'])}: {err['msg']}" for err in error.errors()
    )


def open_live_source(settings: Settings, synthetic: bool = False):
    if synthetic:
        return SyntheticSource(settings.synthetic_width, settings.synthetic_height)

    camera = CameraSource(settings.camera_source)
    if not camera.connect():
        raise FrameSourceError(
            f"Cannot open camera source {settings.camera_source}",
            user_message="Cannot open webcam!",
        )
    return camera


def open_console_source(settings: Settings):
    """Camera if it opens, otherwise the synthetic test pattern"""
    camera = CameraSource(settings.camera_source)
    if camera.connect():
        return camera

    logger.warning("Camera unavailable, falling back to synthetic test image")
    print("Camera unavailable, using synthetic test image.")
    return SyntheticSource(settings.synthetic_width, settings.synthetic_height)


def run(args: argparse.Namespace, settings: Settings) -> int:
    analyzer = create_analyzer(settings)

    if args.command == "live":
        source = open_live_source(settings, synthetic=args.synthetic)
        presenter = WindowPresenter(settings.window_name)
        saver = FrameSaver(settings.save_dir, settings.save_prefix, settings.save_extension)
        return run_live(source, FrameProcessor(analyzer, presenter), presenter, saver)

    if args.command == "console":
        source = open_console_source(settings)
        return run_menu(source, FrameProcessor(analyzer, ConsolePresenter()))

    if args.command == "analyze":
        frame = ImageFileSource(args.image).read()
        FrameProcessor(analyzer, ConsolePresenter()).process(frame)
        return 0

    return 2


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 2

    try:
        settings = _settings_from_args(args)
    except ValidationError as e:
        print(f"Error: Invalid configuration: {_describe(e)}", file=sys.stderr)
        return 1

    setup_logging("gendercam", settings.log_level)

    try:
        return run(args, settings)
    except GenderCamError as e:
        logger.error(e.message)
        print(f"Error: {e.user_message}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
