"""Lightweight launcher for the gamestack demo.

This should remain small and delegate to `gamestack.app`.
"""
import sys
import argparse
import logging
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from gamestack.config import DEFAULT_FPS, DEFAULT_WINDOW_SIZE, Config  # noqa: E402


def main(argv=None):
    parser = argparse.ArgumentParser(description="gamestack demo launcher")
    parser.add_argument("--debug", action="store_true")
    parser.add_argument("--log-level", default=None, help="overrides --debug, e.g. WARNING")
    parser.add_argument("--fps", type=int, default=DEFAULT_FPS)
    parser.add_argument("--width", type=int, default=DEFAULT_WINDOW_SIZE[0])
    parser.add_argument("--height", type=int, default=DEFAULT_WINDOW_SIZE[1])
    args = parser.parse_args(argv)

    logger = logging.getLogger("gamestack.launcher")
    if args.fps <= 0:
        parser.error("--fps must be positive")

    config = Config(window_size=(args.width, args.height), fps=args.fps, debug=args.debug, log_level=args.log_level)
    try:
        # Defer import; this gives clearer errors if src/ is broken
        from gamestack.app import Application

        Application(config).run()
    except Exception as e:
        logger.exception("Failed to start application: %s", e)
        raise


if __name__ == "__main__":
    main()
