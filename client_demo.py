#!/usr/bin/env python3
#
# PROJECT: wireframe-cube
# MODULE: client_demo.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-19
#

import argparse
import logging
import sys

from wireframe_cube.config import RenderConfig
from wireframe_cube.demo import DemoApp
from wireframe_cube.errors import CubeError
from wireframe_cube.logging_config import setup_logging


def positive_int(text):
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def parse_args(argv=None):
    epilog = """\
examples:
  %(prog)s                          Spin the cube until the window is closed
  %(prog)s --max-frames 600         Run for ten seconds at 60 fps, then exit
  %(prog)s --log-level DEBUG        Print frame-rate statistics
"""
    parser = argparse.ArgumentParser(
        description="Rotating 3D wireframe cube",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument("--max-frames", type=positive_int, default=None,
                        help="Exit after this many frames (default: run until closed)")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging verbosity (default: WARNING)")
    return parser.parse_args(argv)


def main(args) -> int:
    setup_logging(getattr(logging, args.log_level))
    config = RenderConfig()

    from wireframe_cube.window import PygameWindow
    window = PygameWindow(config)
    try:
        DemoApp(config, window, max_frames=args.max_frames).run()
    finally:
        window.close()
    return 0


def cli(argv=None) -> int:
    args = parse_args(argv)
    try:
        return main(args)
    except KeyboardInterrupt:
        return 0
    except CubeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(cli())
