"""Named format templates.

Ready-made templates for common layouts. The example in each comment is
what the template produces for 2015-06-11 21:53:12.543294 at UTC+02:00.
"""

from __future__ import annotations

ISO_8601_T: str = "%0Y-%0m-%0dT%0H:%0M:%0S.%0u%t%0Z:%0z"  # 2015-06-11T21:53:12.543294+02:00
ISO_8601_SPACE: str = "%0Y-%0m-%0d %0H:%0M:%0S.%0u %t%0Z:%0z"  # 2015-06-11 21:53:12.543294 +02:00
ISO_8601_NOUSEC: str = "%0Y-%0m-%0d %0H:%0M:%0S %t%0Z:%0z"  # 2015-06-11 21:53:12 +02:00
ISO_8601_WDATE: str = "%0Y-W%0W-%w"  # 2015-W24-4
TIME: str = "%0H:%0M:%0S"  # 21:53:12
DATE: str = "%0Y-%0m-%0d"  # 2015-06-11
RFC_2822: str = "%b, %d %a %Y %H:%0M:%0S %t%0Z%0z"  # Thu, 11 Jun 2015 21:53:12 +0200
US_SHORT: str = "%m/%d/%y %I:%0M %p"  # 6/11/15 9:53 p.m.
US_LONG: str = "%b %d %a %Y, %I:%0M %p"  # Thu 11 Jun 2015, 9:53 p.m.
US_LONGER: str = "%B, %A %d, %Y, %I:%0M %p"  # Thursday, June 11, 2015, 9:53 p.m.

TEMPLATES: dict[str, str] = {
    "iso-8601-t": ISO_8601_T,
    "iso-8601-space": ISO_8601_SPACE,
    "iso-8601-nousec": ISO_8601_NOUSEC,
    "iso-8601-wdate": ISO_8601_WDATE,
    "time": TIME,
    "date": DATE,
    "rfc-2822": RFC_2822,
    "us-short": US_SHORT,
    "us-long": US_LONG,
    "us-longer": US_LONGER,
}


__all__ = [
    "ISO_8601_T",
    "ISO_8601_SPACE",
    "ISO_8601_NOUSEC",
    "ISO_8601_WDATE",
    "TIME",
    "DATE",
    "RFC_2822",
    "US_SHORT",
    "US_LONG",
    "US_LONGER",
    "TEMPLATES",
]
