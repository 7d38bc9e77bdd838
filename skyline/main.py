"""
main.py
-------
Command-line entry point.

Usage:
    python -m skyline                      # Play with assets from the current directory
    python -m skyline --assets-dir PATH    # Load images, skins, fonts and music from PATH
    python -m skyline --mute               # Skip the audio device
    python -m skyline --log-level VERBOSE  # Trace collisions and ignored actions
"""

import argparse
import sys

from skyline.core.debug.debug_logger import DebugLogger, LoggerConfig
from skyline.core.errors import InitializationError, AssetLoadError
from skyline.core.runtime.game_settings import Assets
from skyline.core.runtime.main_loop import MainLoop


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Skyline Jump - a small 2D platformer")
    parser.add_argument("--assets-dir", default=Assets.ROOT,
                        help="Directory containing images/, skins/, fonts/ and music/")
    parser.add_argument("--log-level", default=LoggerConfig.LOG_LEVEL,
                        choices=["NONE", "ERROR", "WARN", "INFO", "VERBOSE"],
                        help="Console log verbosity")
    parser.add_argument("--mute", action="store_true",
                        help="Do not open the audio device")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Run the game; returns the process exit code."""
    args = parse_args(argv)
    LoggerConfig.set_level(args.log_level)

    try:
        MainLoop(asset_root=args.assets_dir, muted=args.mute).run()
    except (InitializationError, AssetLoadError) as e:
        DebugLogger.fail(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
