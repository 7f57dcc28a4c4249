"""Demonstration driver: ``python -m almanac``.

Prints the current time in several layouts, then a few historical dates
with their timezone conversions and Easter Sundays.
"""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from almanac.arithmetic.ops import add, difference
from almanac.convert.clock import Clock, now
from almanac.core.brokendown import BrokenDown
from almanac.core.codec import make, to_timezone
from almanac.core.span import Span
from almanac.derive.easter import easter_in_year
from almanac.format import templates
from almanac.format.interpreter import default_string, format_date

EASTER = "Easter that year: %d.%0m.%J %L"


def _show(out: TextIO, date: BrokenDown, template: str) -> None:
    print(f" - {format_date(date, template, 99)}", file=out)


def run(out: TextIO | None = None, clock: Clock | None = None) -> None:
    """Write the demonstration to a text stream (stdout by default)."""
    if out is None:
        out = sys.stdout
    current = now(clock)

    print(f"\n================ Now ===============\n{default_string(current)}", file=out)
    for template in (
        templates.ISO_8601_SPACE,
        templates.ISO_8601_T,
        templates.RFC_2822,
        templates.ISO_8601_WDATE,
        "%b %a %d, %Y, %I:%0M %p",
        "%d %r %Y, %H:%0M",
        "%m/%d/%y %I:%0M %P",
        "%d.%0m.%Y %H:%0M",
    ):
        _show(out, current, template)

    easter = easter_in_year(current)
    _show(out, easter, EASTER)
    later = add(easter, Span(1, 1, 1, 1, 1, 1))
    print("\n   Date in 1 week, 1 day, 1 hour, 1 min and 1 sec from this Easter:", file=out)
    _show(out, later, templates.ISO_8601_SPACE)

    print("\n== Assassination of Julius Caesar ==\n", file=out)
    caesar = make(-43, 3, 15, 21, 0, 0, 0, 120)
    _show(out, caesar, templates.ISO_8601_SPACE)
    _show(out, caesar, "%A %d, %R %L (%B)")
    _show(out, caesar, "%b, %d %A %J %L")
    caesar_easter = easter_in_year(caesar)
    span = difference(caesar, caesar_easter)
    _show(out, caesar_easter, EASTER)
    print(f"   (difference of {span.weeks} weeks and {span.days} days)", file=out)

    print("\n====== Attack on Pearl Harbor ======\n", file=out)
    attack = make(1941, 12, 7, 7, 48, 0, 0, -630)
    _show(out, attack, templates.ISO_8601_T)
    _show(out, attack, "at %I:%0M %p, on %A %d, %Y (Hawaii, UTC%t%0Z:%0z)")
    _show(out, to_timezone(attack, 540), "at %I:%0M %p, on %A %d, %Y (Japan, UTC%t%0Z:%0z)")
    washington = to_timezone(attack, -300)
    _show(out, washington, "at %I:%0M %p, on %A %d, %Y (Washington D.C., UTC%t%0Z:%0z)")
    _show(out, easter_in_year(washington), EASTER)

    since = difference(attack, current)
    print(
        f"\nAttack on Pearl Harbor happened {since.weeks} weeks, {since.days} days, "
        f"{since.hours} hrs and {since.minutes} mins ago.",
        file=out,
    )


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="almanac",
        description="Show the current date and a few historical dates in several formats.",
    )
    parser.add_argument(
        "--format",
        dest="template",
        help="print only the current time rendered with this template",
    )
    args = parser.parse_args(argv)

    if args.template is not None:
        print(format_date(now(), templates.TEMPLATES.get(args.template, args.template)))
        return 0

    run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
