#!/usr/bin/env python3
"""Boot the sprinkles of the application and show what was loaded."""

import argparse
import logging
import sys
from pathlib import Path

# Add project to path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from sprinkles.bootstrap import boot, setup_logging
from sprinkles.config import load_config

logger = logging.getLogger(__name__)


def parse_arguments() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Boot the application sprinkles")
    parser.add_argument(
        "--config",
        type=str,
        default=str(project_root / "config" / "config.yaml"),
        help="Path to configuration file",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser.parse_args()


def main():
    """Load settings, boot every sprinkle and print the resulting streams."""
    args = parse_arguments()

    if not Path(args.config).exists():
        print(f"Error: {args.config} not found")
        print("Copy config/config.example.yaml to config/config.yaml and configure it")
        sys.exit(1)

    settings = load_config(args.config)
    setup_logging(settings, debug=args.debug)

    container = boot(settings)
    manager = container.sprinkle_manager

    print("Sprinkles (load order):")
    for name, sprinkle in manager.get_sprinkles().items():
        initializer = type(sprinkle).__name__ if sprinkle is not None else "-"
        print(f"  {name:<16} initializer: {initializer}")

    print("\nStreams (highest priority first):")
    for stream in container.locator.schemes():
        found = container.locator.find_resources(f"{stream}://")
        print(f"  {stream}://")
        for path in found:
            print(f"    {path}")

    if container.has("config"):
        print(f"\nSite title: {container.config.get('site.title')}")


if __name__ == "__main__":
    main()
