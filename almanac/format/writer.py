"""Bounded text writer.

Formatting writes into a region of fixed size. The writer keeps the
position, refuses to go past its limit, and records whether anything was
cut off, so running out of room is a value rather than an error.
"""

from __future__ import annotations

import logging

from almanac._internal.validation import validate_non_negative

logger = logging.getLogger(__name__)


class BoundedWriter:
    """Accumulates text up to a fixed number of characters.

    Args:
        limit: Maximum number of characters to hold, or None for no limit.

    Examples:
        >>> w = BoundedWriter(4)
        >>> w.write("2015-06")
        4
        >>> w.getvalue(), w.truncated
        ('2015', True)
    """

    __slots__ = ("_limit", "_parts", "_length", "_truncated")

    def __init__(self, limit: int | None = None) -> None:
        if limit is not None:
            validate_non_negative("limit", limit)
        self._limit: int | None = limit
        self._parts: list[str] = []
        self._length: int = 0
        self._truncated: bool = False

    @property
    def limit(self) -> int | None:
        """Return the character limit (None if unbounded)."""
        return self._limit

    @property
    def remaining(self) -> int | None:
        """Return how many more characters fit (None if unbounded)."""
        if self._limit is None:
            return None
        return self._limit - self._length

    @property
    def full(self) -> bool:
        """Return True once no more characters fit."""
        return self._limit is not None and self._length >= self._limit

    @property
    def truncated(self) -> bool:
        """Return True if any write was cut short or refused."""
        return self._truncated

    def __len__(self) -> int:
        return self._length

    def write(self, text: str) -> int:
        """Write as much of text as fits and return the count written."""
        remaining = self.remaining
        if remaining is not None and len(text) > remaining:
            logger.debug("output truncated at %d characters", self._limit)
            self._truncated = True
            text = text[:remaining]
        self._parts.append(text)
        self._length += len(text)
        return len(text)

    def write_whole(self, text: str) -> int:
        """Write text only if all of it fits; return its length or 0."""
        remaining = self.remaining
        if remaining is not None and len(text) > remaining:
            logger.debug("refused %d characters with %d left", len(text), remaining)
            self._truncated = True
            return 0
        return self.write(text)

    def getvalue(self) -> str:
        """Return everything written so far."""
        return "".join(self._parts)


__all__ = ["BoundedWriter"]
