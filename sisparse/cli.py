"""
CLI (Command Line Interface).

Quick terminal commands for looking at a course timetable, e.g.:

    sisparse show NSWI177
    sisparse json NSWI177 --out nswi177.json

Note:
- This CLI prints plain text (no rich formatting)
- All fetching/parsing lives in sisparse.scrape / sisparse.parse
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from sisparse.errors import SisParseError
from sisparse.model import EventGroup, WeekParity, groups_to_dicts
from sisparse.scrape import get_course_events

DAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri")

PARITY_LABELS = {
    WeekParity.EVERY: "",
    WeekParity.ODD: " (odd weeks)",
    WeekParity.EVEN: " (even weeks)",
}


def format_groups(groups: list[EventGroup]) -> list[str]:
    """
    Render event groups as human readable lines.
    """
    lines: list[str] = []
    for i, group in enumerate(groups, start=1):
        first = group[0]
        lines.append(f"[{i}] {first.name} | {first.teacher}")
        for ev in group:
            lines.append(
                f"    {ev.type} {DAY_NAMES[ev.day]} "
                f"{ev.time_from:%H:%M}-{ev.time_to:%H:%M}{PARITY_LABELS[ev.week_parity]}"
            )
    return lines


def _cmd_show(args: argparse.Namespace) -> int:
    groups = get_course_events(args.course_code)
    if not groups:
        print("No events found.")
        return 0

    for line in format_groups(groups):
        print(line)
    return 0


def _cmd_json(args: argparse.Namespace) -> int:
    groups = get_course_events(args.course_code)
    text = json.dumps(groups_to_dicts(groups), indent=2, ensure_ascii=False)

    out_path = (args.out or "").strip()
    if not out_path:
        print(text)
        return 0

    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text + "\n", encoding="utf-8")
    print(f"Exported {len(groups)} groups to: {out}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """
    Build the argparse CLI parser with sub-commands.
    """
    parser = argparse.ArgumentParser(prog="sisparse", description="Course timetables from SIS")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_show = sub.add_parser("show", help="Print the timetable of a course")
    p_show.add_argument("course_code", type=str, help="Course code (e.g. NSWI177)")

    p_json = sub.add_parser("json", help="Dump the timetable of a course as JSON")
    p_json.add_argument("course_code", type=str, help="Course code (e.g. NSWI177)")
    p_json.add_argument("--out", "-o", type=str, default="", help="Output file (default: stdout)")

    return parser


def main(argv: list[str] | None = None) -> None:
    """
    CLI entry point. Parses args, dispatches to command handlers,
    and exits via SystemExit with a return code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    course_code = (args.course_code or "").strip()
    if not course_code:
        print("Please provide a course code.", file=sys.stderr)
        raise SystemExit(1)
    args.course_code = course_code

    try:
        if args.command == "show":
            raise SystemExit(_cmd_show(args))
        if args.command == "json":
            raise SystemExit(_cmd_json(args))
    except SisParseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1)

    raise SystemExit(2)
