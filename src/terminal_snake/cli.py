"""Command-line launcher for Terminal Snake."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import fields

from terminal_snake.config import GameConfig

logger = logging.getLogger(__name__)


def _add_config_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    # One flag per GameConfig field, e.g. --ticks-per-second.
    for f in fields(GameConfig):
        p.add_argument(f"--{f.name.replace('_', '-')}", type=int, default=None)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="terminal-snake",
        description="Terminal Snake game and headless simulation tools.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging.",
    )
    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- play ---
    play_p = sub.add_parser("play", help="Play in the terminal.")
    _add_config_flags(play_p)

    # --- simulate ---
    sim_p = sub.add_parser(
        "simulate", help="Run headless games with random input.",
    )
    _add_config_flags(sim_p)
    sim_p.add_argument("--games", type=int, default=10)
    sim_p.add_argument("--max-ticks", type=int, default=1_000)
    sim_p.add_argument(
        "--seed", type=int, default=None,
        help="Seed for the simulated key presses.",
    )

    # --- config ---
    cfg_p = sub.add_parser(
        "config", help="Write the effective configuration to a JSON file.",
    )
    _add_config_flags(cfg_p)
    cfg_p.add_argument("output", help="Path for the JSON config file.")

    return parser


def _resolve_config(
    parser: argparse.ArgumentParser, args: argparse.Namespace,
) -> GameConfig:
    overrides = {
        f.name: getattr(args, f.name)
        for f in fields(GameConfig)
        if getattr(args, f.name, None) is not None
    }
    try:
        config = GameConfig.load(args.config) if args.config else GameConfig()
        if overrides:
            config = config.replace(**overrides)
    except (OSError, ValueError) as exc:
        parser.error(str(exc))
    return config


def _run_play(config: GameConfig, args: argparse.Namespace) -> int:
    from terminal_snake.terminal import play

    result = play(config)
    print(f"Final length: {result.length}")  # noqa: T201
    return 0


def _run_simulate(config: GameConfig, args: argparse.Namespace) -> int:
    from terminal_snake.simulate import run_simulation

    summary = run_simulation(
        config,
        games=args.games,
        max_ticks=args.max_ticks,
        seed=args.seed,
    )
    print(summary.summary())  # noqa: T201
    return 0


def _run_config(config: GameConfig, args: argparse.Namespace) -> int:
    config.save(args.output)
    print(f"Wrote config to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``terminal-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.command == "play":
        # Log lines on stderr would tear through the curses screen.
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 1

    config = _resolve_config(parser, args)
    if args.command == "simulate" and args.games < 1:
        parser.error("--games must be at least 1.")

    handlers = {
        "play": _run_play,
        "simulate": _run_simulate,
        "config": _run_config,
    }
    return handlers[args.command](config, args)


if __name__ == "__main__":
    sys.exit(main())
