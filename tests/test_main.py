from __future__ import annotations

import contextlib
import io
import json
import sys
import tempfile
import unittest
from pathlib import Path


ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


from draughts.driver.session import DriverOptions  # noqa: E402
from draughts.main import main, options_from_args, parse_args, run  # noqa: E402


class ArgumentTests(unittest.TestCase):
    def test_defaults(self) -> None:
        options = options_from_args(parse_args([]))
        self.assertEqual(options, DriverOptions())
        self.assertEqual(options.delay, 0.75)

    def test_paths_and_flags(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            script = Path(tmp) / "game.txt"
            script.write_text("B3A4\n", encoding="utf-8")
            args = parse_args([str(script), str(Path(tmp) / "out.txt"), "--delay", "0", "--gui"])
            options = options_from_args(args)
        self.assertEqual(options.script, script)
        self.assertEqual(options.replay.name, "out.txt")
        self.assertEqual(options.delay, 0.0)
        self.assertTrue(options.gui)

    def test_bad_arguments_exit(self) -> None:
        with contextlib.redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit):
                parse_args(["does-not-exist.txt"])
            with self.assertRaises(SystemExit):
                parse_args(["--delay", "-1"])

    def test_undecodable_script_exits(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            script = Path(tmp) / "game.txt"
            script.write_bytes(b"B3 to A4\n\xff\xfe\n")
            stderr = io.StringIO()
            with contextlib.redirect_stderr(stderr):
                with self.assertRaises(SystemExit) as caught:
                    main([str(script), "--delay", "0"])
        self.assertEqual(caught.exception.code, 2)
        self.assertIn("cannot be read", stderr.getvalue())

    def test_directory_as_script_exits(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with contextlib.redirect_stderr(io.StringIO()):
                with self.assertRaises(SystemExit):
                    parse_args([tmp])


class ScriptedRunTests(unittest.TestCase):
    def test_script_writes_log_and_snapshot(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            tmp_path = Path(tmp)
            script = tmp_path / "game.txt"
            script.write_text("F3 to E4\nC6 to D5\nE4 to C6\nB7 to D5\n", encoding="utf-8")
            replay = tmp_path / "replay.txt"
            snapshot = tmp_path / "state.json"

            with contextlib.redirect_stdout(io.StringIO()):
                code = run(DriverOptions(script=script, replay=replay, snapshot=snapshot, delay=0))

            self.assertEqual(code, 1)
            self.assertEqual(replay.read_text(encoding="utf-8"), "F3E4\nC6D5\nE4C6\nB7D5\n")
            state = json.loads(snapshot.read_text(encoding="utf-8"))

        self.assertEqual(state["moveCount"], 4)
        self.assertEqual(state["turn"], "black")
        self.assertEqual(state["pieceCounts"]["white"]["captured"], 1)
        self.assertEqual(state["pieceCounts"]["black"]["captured"], 1)

    def test_unopenable_log_is_skipped(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            tmp_path = Path(tmp)
            script = tmp_path / "game.txt"
            script.write_text("F3 to E4\n", encoding="utf-8")
            replay = tmp_path / "missing" / "log.txt"

            with contextlib.redirect_stdout(io.StringIO()):
                with self.assertLogs("draughts.main", level="WARNING") as logs:
                    code = main([str(script), str(replay), "--delay", "0"])

            self.assertFalse(replay.exists())
        self.assertEqual(code, 1)
        self.assertIn("Not writing a move log", logs.output[0])


if __name__ == "__main__":
    unittest.main()
