"""DateTimeTextAdapter: converts between values and their canonical text.

Printing always uses the canonical pattern. Parsing is an ordered
sequence of attempts that stops at the first success:

1. full date-time under the canonical pattern;
2. date-only under the pattern's date sub-pattern, at midnight.

When both fail, the error offset comes from the date-only attempt.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from datetime import date, datetime

from datespin.domain.errors import ParseError
from datespin.domain.patterns import DateTimePattern, ParseAttempt, compile_pattern


class DateTimeTextAdapter:
    """Stateless text adapter around one canonical pattern.

    Safe to share by reference among many models and editors.
    """

    def __init__(self, pattern: str | DateTimePattern) -> None:
        if isinstance(pattern, DateTimePattern):
            self._pattern = pattern
        else:
            self._pattern = compile_pattern(pattern)

    def __repr__(self) -> str:
        return f"DateTimeTextAdapter({self._pattern.pattern!r})"

    @property
    def pattern(self) -> DateTimePattern:
        return self._pattern

    def format(self, value: datetime | date | str | None) -> str:
        """Render *value* in the canonical pattern.

        ``None`` renders as ``""``. Text is first normalized, as ISO-8601
        and then under the canonical pattern, so that any accepted input
        shape prints canonically.

        Raises:
            ParseError: If *value* is text that normalizes under neither
                format, or of an unsupported type.
        """
        if value is None:
            return ""
        return self._pattern.format(self.coerce(value))

    def parse(self, text: str) -> datetime:
        """Parse *text* as a full date-time, falling back to date-only.

        Raises:
            ParseError: With the date-only attempt's message and offset.
        """
        if not isinstance(text, str):
            msg = f"Cannot parse {type(text).__name__}, expected text"
            raise ParseError(msg, text=repr(text), error_index=0)

        last = ParseAttempt(ok=False, message=f"Text {text!r} could not be parsed", error_index=0)
        for attempt in self._attempts(text):
            if attempt.ok and attempt.value is not None:
                return attempt.value
            last = attempt
        raise ParseError(last.message, text=text, error_index=last.error_index)

    def try_parse(self, text: str) -> datetime | None:
        """Like :meth:`parse` but returns None on failure."""
        try:
            return self.parse(text)
        except ParseError:
            return None

    def coerce(self, value: datetime | date | str) -> datetime:
        """Normalize a typed or textual value to a naive datetime.

        Text is read as ISO-8601 first, then under the canonical pattern.

        Raises:
            ParseError: If *value* cannot be normalized.
        """
        if isinstance(value, datetime):
            return value.replace(tzinfo=None)
        if isinstance(value, date):
            return datetime.combine(value, datetime.min.time())
        if isinstance(value, str):
            iso = _from_iso(value)
            if iso is not None:
                return iso
            return self.parse(value)
        msg = f"Cannot format {type(value).__name__}"
        raise ParseError(msg, text=repr(value), error_index=0)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _attempts(self, text: str) -> Iterator[ParseAttempt]:
        steps: tuple[Callable[[], ParseAttempt], ...] = (
            lambda: self._pattern.match(text),
            lambda: self._pattern.match(text, date_only=True),
        )
        for step in steps:
            yield step()


def _from_iso(text: str) -> datetime | None:
    """Read ISO-8601 combined date-time text; None if it is not one."""
    if "T" not in text.upper():
        return None
    try:
        return datetime.fromisoformat(text).replace(tzinfo=None)
    except ValueError:
        return None
