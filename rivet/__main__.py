"""
Desktop entry point.

Usage:
    python -m rivet [options]

Options:
    --app NAME        Application to start [default: shell]
    --scale N         Window scale factor (1-8)
    --font PATH       Binary font file; falls back to the system font
    --config PATH     JSON configuration file
    --log-level LVL   Logging level [default: INFO]

Examples:
    python -m rivet --app calculator --scale 3
    python -m rivet --config rivet.json --log-level DEBUG
"""

import argparse
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

from rivet.apps import APPLICATIONS
from rivet.core.config import RivetConfig

logger = logging.getLogger(__name__)


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Rivet retro desktop")
    parser.add_argument(
        "--app",
        choices=sorted(APPLICATIONS),
        default=None,
        help="Application to start",
    )
    parser.add_argument("--scale", type=int, default=None, help="Window scale factor (1-8)")
    parser.add_argument("--font", type=Path, default=None, help="Binary font file")
    parser.add_argument("--config", type=Path, default=None, help="JSON configuration file")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Logging level",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> RivetConfig:
    """Config file (if any) with command line overrides applied."""
    config = RivetConfig.from_file(args.config) if args.config else RivetConfig()

    if args.app is not None:
        config.start_app = args.app
    if args.scale is not None:
        config.scale_factor = args.scale
    if args.font is not None:
        config.font_path = args.font
    if args.log_level is not None:
        config.log_level = args.log_level

    return config


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        config = build_config(args)
    except (OSError, ValidationError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    logger.info("Starting %s at %dx scale", config.start_app, config.scale_factor)

    from rivet.runtime.desktop import Desktop

    Desktop(config).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
