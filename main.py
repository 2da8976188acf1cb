"""
Entry point for the Tetris game.

Supports two modes:
  - play:   Play Tetris in a pygame window.
  - record: Play a self-driven demo game headlessly and save it as a GIF.

Usage:
    python main.py --mode play
    python main.py --mode play --config config/game.yaml --seed 7
    python main.py --mode record --output assets/demo.gif
"""

from __future__ import annotations

import argparse
import pathlib
import sys

import yaml


def load_config(config_path: str | pathlib.Path) -> dict:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Dict of configuration key-value pairs (empty for an empty file).

    Raises:
        FileNotFoundError: If the config file does not exist.
    """
    config_path = pathlib.Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Namespace with mode, config, seed and output attributes.
    """
    parser = argparse.ArgumentParser(
        description="Tetris: play in a window or record a demo GIF.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--mode",
        type=str,
        choices=["play", "record"],
        default="play",
        help="Run mode: 'play' (pygame window) or 'record' (headless demo GIF).",
    )
    parser.add_argument(
        "--config",
        type=str,
        default="config/game.yaml",
        help="Path to the YAML configuration file.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the piece generator (overrides the config file).",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="GIF path for 'record' mode (default: record_output from config).",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Main entry point: parse args, load config, and dispatch to the selected mode."""
    args = parse_args(argv)
    try:
        config = load_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    if args.seed is not None:
        config["seed"] = args.seed

    if args.mode == "play":
        from classic_tetris.play import play_manual
        play_manual(config)

    elif args.mode == "record":
        from classic_tetris.snapshot import record_demo
        output = args.output or config.get("record_output", "assets/demo.gif")
        record_demo(config, output)

    else:
        print(f"Unknown mode: {args.mode}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
