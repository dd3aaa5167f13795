"""Command-line launcher for the console snake game."""

from __future__ import annotations

import argparse
import curses
import logging
import sys

from console_snake.config import INITIAL_DIRECTION_CHOICES, GameConfig

logger = logging.getLogger(__name__)

_LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="console-snake",
        description="Snake in the terminal.",
    )
    parser.add_argument(
        "--log-file", type=str, default=None,
        help="Write logs to this file instead of stderr.",
    )
    parser.add_argument(
        "--log-level", type=str, default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Defaults to INFO with --log-file, WARNING otherwise.",
    )

    # Game settings shared by every subcommand.
    settings = argparse.ArgumentParser(add_help=False)
    settings.add_argument(
        "--config", type=str, default=None,
        help="Path to a JSON config file (flags override its values).",
    )
    settings.add_argument("--width", type=int, default=None)
    settings.add_argument("--height", type=int, default=None)
    settings.add_argument(
        "--speed", type=int, default=None,
        help="Milliseconds between snake moves.",
    )
    settings.add_argument("--body-length", type=int, default=None)
    settings.add_argument(
        "--direction", type=str, default=None,
        choices=list(INITIAL_DIRECTION_CHOICES),
    )
    settings.add_argument(
        "--poll-interval", type=int, default=None,
        help="Milliseconds to sleep between input samples.",
    )
    settings.add_argument("--seed", type=int, default=None)

    sub = parser.add_subparsers(dest="command", help="Available commands.")

    # --- play ---
    play_p = sub.add_parser("play", parents=[settings], help="Play the game.")
    play_p.add_argument(
        "--no-replay", action="store_true",
        help="Exit after the first round instead of offering another.",
    )

    # --- dump-config ---
    dump_p = sub.add_parser(
        "dump-config", parents=[settings],
        help="Write the effective configuration as JSON.",
    )
    dump_p.add_argument("output", help="Path for the JSON file.")

    return parser


def _resolve_config(args: argparse.Namespace) -> GameConfig:
    """Load ``--config`` if given and apply command-line overrides."""
    config = GameConfig.load(args.config) if args.config else GameConfig()
    return config.with_overrides(
        grid_width=args.width,
        grid_height=args.height,
        movement_speed_ms=args.speed,
        initial_body_length=args.body_length,
        initial_direction=args.direction,
        poll_interval_ms=args.poll_interval,
        seed=args.seed,
    )


def _configure_logging(args: argparse.Namespace) -> None:
    if args.log_file:
        level = args.log_level or "INFO"
        logging.basicConfig(level=level, format=_LOG_FORMAT, filename=args.log_file)
    else:
        level = args.log_level or "WARNING"
        logging.basicConfig(level=level, format=_LOG_FORMAT)


def _play_session(window, config: GameConfig, replay: bool) -> list[int]:
    from console_snake.engine import GameState
    from console_snake.runner import play
    from console_snake.terminal import CursesKeySource, CursesRenderer

    curses.curs_set(0)
    keys = CursesKeySource(window)
    renderer = CursesRenderer(window)
    state = GameState(config)
    ask_replay = keys.ask_replay if replay else (lambda: False)
    return play(state, keys, renderer, ask_replay)


def _run_play(args: argparse.Namespace, config: GameConfig) -> int:
    scores = curses.wrapper(_play_session, config, not args.no_replay)
    print(f"Final score: {scores[-1]}")  # noqa: T201
    return 0


def _run_dump_config(args: argparse.Namespace, config: GameConfig) -> int:
    config.save(args.output)
    print(f"Wrote configuration to {args.output}")  # noqa: T201
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``console-snake`` CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    _configure_logging(args)

    try:
        config = _resolve_config(args)
    except (OSError, ValueError) as exc:
        logger.debug("Configuration rejected.", exc_info=True)
        print(f"console-snake: invalid configuration: {exc}", file=sys.stderr)  # noqa: T201
        return 1

    handlers = {
        "play": _run_play,
        "dump-config": _run_dump_config,
    }
    return handlers[args.command](args, config)


if __name__ == "__main__":
    sys.exit(main())
