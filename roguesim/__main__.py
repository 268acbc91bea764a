"""Entry point: ``python -m roguesim``.

Supports two modes:
  - ``python -m roguesim``            → Launch the FastAPI state/control server
  - ``python -m roguesim cli``        → Headless session; the player passes every turn
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Turn-based roguelike with GOAP monsters")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=42)
    srv.add_argument("--monsters", type=int, default=6)
    srv.add_argument("--potions", type=int, default=4)
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Run a headless session")
    cli.add_argument("--seed", type=int, default=42)
    cli.add_argument("--turns", type=int, default=50, help="Player turns to play before quitting")
    cli.add_argument("--monsters", type=int, default=6)
    cli.add_argument("--potions", type=int, default=4)
    cli.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from roguesim.api.app import create_app
    from roguesim.config import SimulationConfig

    config = SimulationConfig(
        world_seed=args.seed,
        monster_count=args.monsters,
        potion_count=args.potions,
        log_level=args.log_level,
    )
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_cli(args: argparse.Namespace) -> None:
    from roguesim.ai.brain import DecisionDriver
    from roguesim.config import SimulationConfig
    from roguesim.core.enums import ActionType
    from roguesim.engine.turn_engine import TurnEngine
    from roguesim.systems.generator import build_arena
    from roguesim.systems.rng import DeterministicRNG
    from roguesim.utils.logging import setup_logging

    config = SimulationConfig(
        world_seed=args.seed,
        monster_count=args.monsters,
        potion_count=args.potions,
        log_level=args.log_level,
    )

    setup_logging(config.log_level)

    rng = DeterministicRNG(config.world_seed)
    world = build_arena(config, rng)
    engine = TurnEngine(config, world, DecisionDriver(config))
    engine.start()

    logger.info("=== Session started (seed=%d) ===", config.world_seed)
    while not engine.halted:
        engine.poll()
        if not engine.awaiting_player:
            continue
        if engine.player_turns > args.turns:
            engine.finish()
            break
        engine.submit(ActionType.PASS)

    moves = sum(1 for e in engine.event_log.latest(len(engine.event_log)) if e.category == "movement")
    logger.info(
        "=== Session over at %s: %d player turns, %d moves, %d events ===",
        engine.now, engine.player_turns, moves, len(engine.event_log),
    )


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    # Default to serve mode if no subcommand given
    if args.command is None or args.command == "serve":
        if args.command is None:
            # Re-parse with serve defaults
            args = parser.parse_args(["serve"])
        _run_server(args)
    elif args.command == "cli":
        _run_cli(args)


if __name__ == "__main__":
    main()
