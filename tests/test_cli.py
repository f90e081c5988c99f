"""
Tests for CLI entry points.

These tests focus on:
- Basic CLI argument validation (a course code is required)
- Text and JSON rendering of event groups
- Errors are reported with exit code 1 instead of a traceback
"""

import io
import json
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from datetime import time
from pathlib import Path
from unittest import mock

from sisparse.cli import format_groups, main
from sisparse.errors import ScheduleLinkNotFoundError
from sisparse.model import Event, WeekParity

GROUPS = [
    [
        Event("P", "Úvod do Linuxu", "Libor Forst", 0, time(9, 0), time(10, 30)),
        Event("P", "Úvod do Linuxu", "Libor Forst", 3, time(14, 0), time(15, 30), WeekParity.ODD),
    ]
]


class TestFormat(unittest.TestCase):
    def test_format_groups(self) -> None:
        lines = format_groups(GROUPS)
        self.assertEqual(
            lines,
            [
                "[1] Úvod do Linuxu | Libor Forst",
                "    P Mon 09:00-10:30",
                "    P Thu 14:00-15:30 (odd weeks)",
            ],
        )


class TestCLI(unittest.TestCase):
    def _run(self, argv: list) -> tuple:
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            with self.assertRaises(SystemExit) as ctx:
                main(argv)
        return ctx.exception.code, out.getvalue(), err.getvalue()

    def test_show_requires_course_code(self) -> None:
        code, _, _ = self._run(["show", "  "])
        self.assertNotEqual(code, 0)

    def test_show(self) -> None:
        with mock.patch("sisparse.cli.get_course_events", return_value=GROUPS) as get:
            code, out, _ = self._run(["show", " NSWI177 "])
        self.assertEqual(code, 0)
        get.assert_called_once_with("NSWI177")
        self.assertIn("Libor Forst", out)

    def test_show_empty(self) -> None:
        with mock.patch("sisparse.cli.get_course_events", return_value=[]):
            code, out, _ = self._run(["show", "NSWI177"])
        self.assertEqual(code, 0)
        self.assertIn("No events found.", out)

    def test_json_stdout(self) -> None:
        with mock.patch("sisparse.cli.get_course_events", return_value=GROUPS):
            code, out, _ = self._run(["json", "NSWI177"])
        self.assertEqual(code, 0)
        data = json.loads(out)
        self.assertEqual(len(data), 1)
        self.assertEqual(data[0][1]["time_from"], "14:00")
        self.assertEqual(data[0][1]["week_parity"], 1)
        self.assertEqual(data[0][0]["day"], 0)

    def test_json_file(self) -> None:
        with tempfile.TemporaryDirectory() as d:
            p = Path(d) / "sub" / "out.json"
            with mock.patch("sisparse.cli.get_course_events", return_value=GROUPS):
                code, _, _ = self._run(["json", "NSWI177", "--out", str(p)])
            self.assertEqual(code, 0)
            data = json.loads(p.read_text(encoding="utf-8"))
            self.assertEqual(data[0][0]["name"], "Úvod do Linuxu")

    def test_error_exit_code(self) -> None:
        with mock.patch("sisparse.cli.get_course_events", side_effect=ScheduleLinkNotFoundError()):
            code, _, err = self._run(["show", "NSWI177"])
        self.assertEqual(code, 1)
        self.assertIn("Couldn't find schedule URL", err)


if __name__ == "__main__":
    unittest.main()
