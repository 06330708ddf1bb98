from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from .core.game import Game
from .driver.replay import MoveLog, read_script, script_reader
from .driver.session import DriverOptions, GameSession

LOGGER = logging.getLogger("draughts.main")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play English draughts in the terminal.")
    parser.add_argument("script", nargs="?", type=Path, help="Replay file with one move per line.")
    parser.add_argument("replay", nargs="?", type=Path, help="Write every played move to this file.")
    parser.add_argument(
        "--delay",
        type=float,
        default=0.75,
        help="Seconds to pause between scripted moves.",
    )
    parser.add_argument("--snapshot", type=Path, help="Write the final game state as JSON.")
    parser.add_argument("--gui", action="store_true", help="Play in a pygame window instead.")
    parser.add_argument("--log-level", default="warning", help="Python logging level.")
    args = parser.parse_args(argv)
    if args.delay < 0:
        parser.error("--delay must not be negative.")
    if args.script is not None:
        if not args.script.is_file():
            parser.error(f"Script '{args.script}' does not exist.")
        try:
            read_script(args.script)
        except (OSError, UnicodeDecodeError) as exc:
            parser.error(f"Script '{args.script}' cannot be read: {exc}")
    return args


def options_from_args(args: argparse.Namespace) -> DriverOptions:
    return DriverOptions(
        script=args.script,
        replay=args.replay,
        snapshot=args.snapshot,
        delay=args.delay,
        gui=args.gui,
    )


def write_snapshot(game: Game, path: Path) -> None:
    from .driver.serializers import snapshot_game

    path.write_text(snapshot_game(game).model_dump_json(indent=2), encoding="utf-8")
    LOGGER.info("Wrote snapshot to %s", path)


def run(options: DriverOptions) -> int:
    game = Game()

    if options.gui:
        from .ui.pygame_gui import run_gui

        run_gui(game)
        if options.snapshot is not None:
            write_snapshot(game, options.snapshot)
        return 0

    from .ui.console import ConsoleRenderer

    renderer = ConsoleRenderer()
    if options.script is not None:
        reader = script_reader(read_script(options.script))
    else:
        reader = renderer.read

    move_log = None
    if options.replay is not None:
        try:
            move_log = MoveLog.open(options.replay)
        except OSError as exc:
            LOGGER.warning("Not writing a move log, %s cannot be opened: %s", options.replay, exc)
    try:
        session = GameSession(
            renderer,
            reader,
            game=game,
            scripted=options.script is not None,
            move_log=move_log,
            delay=options.delay,
        )
        code = session.run()
    finally:
        if move_log is not None:
            move_log.close()

    if options.snapshot is not None:
        write_snapshot(game, options.snapshot)
    return code


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run(options_from_args(args))


if __name__ == "__main__":
    raise SystemExit(main())
