from __future__ import annotations

import argparse
import logging
from pathlib import Path

from pyrunner.config import RunnerConfig
from pyrunner.domain.exceptions import ConfigError
from pyrunner.domain.rng import make_rng

logger = logging.getLogger("pyrunner")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pyrunner", description="Endless runner: jump the obstacles.")
    parser.add_argument("--seed", type=int, default=None, help="seed for obstacle sizes")
    parser.add_argument("--sprite", type=Path, default=None, help="runner image (GIF/PNG)")
    parser.add_argument("--fps", type=int, default=60, help="target frames per second")
    parser.add_argument("--headless", action="store_true", help="run without a window until game over")
    parser.add_argument("--max-ticks", type=int, default=None, help="tick budget for --headless")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = RunnerConfig(fps=args.fps, sprite_path=args.sprite)
    except ConfigError as e:
        parser.error(str(e))

    rng = make_rng(args.seed)

    if args.headless:
        # Local imports keep --headless usable where tkinter is missing.
        from pyrunner.app.frame_loop import run_headless
        from pyrunner.app.runner_controller import RunnerController

        controller = RunnerController(config, rng=rng)
        ticks = run_headless(controller.tick, max_ticks=args.max_ticks)
        logger.info("headless run finished after %d ticks", ticks)
        print(f"ticks={ticks} score={controller.state.display_score} over={controller.game_over}")
        return 0

    from pyrunner.app.game_app import GameApp

    GameApp(config, rng=rng).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
