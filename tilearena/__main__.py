"""Entry point: ``python -m tilearena``.

Supports two modes:
  - ``python -m tilearena``            → Launch FastAPI server
  - ``python -m tilearena cli``        → Headless run: print the reachable map once
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Tile Arena reachable-path explorer")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=42)
    srv.add_argument("--width", type=int, default=10)
    srv.add_argument("--height", type=int, default=10)
    srv.add_argument("--move-range", type=int, default=3)
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Generate a layout and print the actor's reachable tiles")
    cli.add_argument("--seed", type=int, default=42)
    cli.add_argument("--width", type=int, default=10)
    cli.add_argument("--height", type=int, default=10)
    cli.add_argument("--move-range", type=int, default=3)
    cli.add_argument("--threshold", type=float, default=None, help="Noise threshold (default: drawn from 0.4-0.6)")
    cli.add_argument("--x", type=int, default=None, help="Start x (default: random free tile)")
    cli.add_argument("--y", type=int, default=None, help="Start y (default: random free tile)")
    cli.add_argument("--trace", type=str, default=None, help="Write the search trace to this JSON file")
    cli.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from tilearena.api.app import create_app
    from tilearena.config import ArenaConfig

    config = ArenaConfig(
        seed=args.seed,
        width=args.width,
        height=args.height,
        move_range=args.move_range,
        log_level=args.log_level,
    )
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_cli(args: argparse.Namespace) -> int:
    from tilearena.ai.reachability import InvalidArgumentError
    from tilearena.config import ArenaConfig
    from tilearena.core.actor import TileActor
    from tilearena.core.arena import TileArena
    from tilearena.core.models import Vector2
    from tilearena.systems.rng import DeterministicRNG
    from tilearena.utils.logging import configure_logging
    from tilearena.utils.text_map import render_map
    from tilearena.utils.trace import TraceRecorder

    config = ArenaConfig(
        seed=args.seed,
        width=args.width,
        height=args.height,
        move_range=args.move_range,
        log_level=args.log_level,
    )
    configure_logging(config)

    arena = TileArena(config.width, config.height, DeterministicRNG(config.seed), noise_scale=config.noise_scale)
    actor = TileActor(arena, move_range=config.move_range)
    arena.randomize(args.threshold, low=config.wall_threshold_min, high=config.wall_threshold_max)

    if args.x is not None and args.y is not None:
        actor.location = Vector2(args.x, args.y)

    try:
        reachable = actor.select()
    except InvalidArgumentError as exc:
        logger.error("Cannot search from %s: %s", actor.location, exc)
        return 2

    for row in render_map(arena.grid, actor.location, dict(reachable)):
        print(row)
    logger.info(
        "%d tiles reachable from %s within %d moves",
        len(reachable), actor.location, actor.move_range,
    )

    if args.trace:
        recorder = TraceRecorder(args.trace, actor.location, actor.move_range)
        recorder.record_all(arena.get_algorithm_steps(actor.location, actor.move_range))
        recorder.flush()
    return 0


def _check_args(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    """Reject values ArenaConfig would refuse, as usage errors rather than tracebacks."""
    if args.width <= 0 or args.height <= 0:
        parser.error(f"--width and --height must be positive, got {args.width}x{args.height}")
    if args.move_range < 0:
        parser.error(f"--move-range must be zero or more, got {args.move_range}")
    if args.command == "cli" and (args.x is None) != (args.y is None):
        parser.error("--x and --y must be given together")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Default to serve mode if no subcommand given
    if args.command is None:
        args = parser.parse_args(["serve"])
    _check_args(parser, args)

    if args.command == "serve":
        _run_server(args)
        return 0
    return _run_cli(args)


if __name__ == "__main__":
    raise SystemExit(main())
