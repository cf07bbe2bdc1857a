"""Canonical text patterns: compile, format, and parse civil date-times.

Patterns use the familiar letter notation (``"MM/dd/yyyy HH:mm"``):

=======  ==========================================================
Letter   Field
=======  ==========================================================
y, u     year (``yy`` is a two-digit year in 2000-2099)
M        month (``M``/``MM`` numeric, ``MMM`` short, ``MMMM`` full)
d        day of month
H        hour of day, 0-23
h        clock hour, 1-12 (needs ``a`` to parse)
a        AM/PM marker
m        minute
s        second
S        fraction of second, one digit per letter
E        weekday (``E``-``EEE`` short, ``EEEE`` full)
=======  ==========================================================

Text inside single quotes is literal and ``''`` is a literal quote. Any
other non-letter character is literal.

Parsing never raises: every attempt returns a :class:`ParseAttempt`
carrying either the value or the message and character offset of the
first mismatch.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache

from pydantic import BaseModel

from datespin.domain.errors import PatternError

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
MONTH_ABBRS = tuple(name[:3] for name in MONTH_NAMES)
WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
WEEKDAY_ABBRS = tuple(name[:3] for name in WEEKDAY_NAMES)
AMPM = ("AM", "PM")

DEFAULT_PATTERN = "yyyy-MM-dd HH:mm"

DATE_LETTERS = frozenset("yuMdE")
TIME_LETTERS = frozenset("HhamsS")
FIELD_LETTERS = DATE_LETTERS | TIME_LETTERS

# Longest run of each letter the notation defines.
_MAX_COUNT: dict[str, int] = {
    "M": 4,
    "d": 2,
    "H": 2,
    "h": 2,
    "m": 2,
    "s": 2,
    "S": 9,
    "E": 4,
}

# (field name, lowest, highest) for numeric range checks.
_RANGES: dict[str, tuple[str, int, int]] = {
    "M": ("month", 1, 12),
    "d": ("day", 1, 31),
    "H": ("hour", 0, 23),
    "h": ("clock hour", 1, 12),
    "m": ("minute", 0, 59),
    "s": ("second", 0, 59),
}


@dataclass(frozen=True)
class Token:
    """One element of a compiled pattern: a field run or literal text."""

    letter: str = ""
    count: int = 0
    literal: str = ""

    @property
    def is_field(self) -> bool:
        return bool(self.letter)

    @property
    def is_date_field(self) -> bool:
        return self.letter in DATE_LETTERS

    def render(self) -> str:
        """Render the token back into pattern notation."""
        if self.is_field:
            return self.letter * self.count
        if not any(ch.isalpha() or ch == "'" for ch in self.literal):
            return self.literal
        return "'" + self.literal.replace("'", "''") + "'"


class ParseAttempt(BaseModel):
    """Result-or-failure of a single parse attempt."""

    model_config = {"frozen": True}

    ok: bool
    value: datetime | None = None
    message: str = ""
    error_index: int = -1


def tokenize(pattern: str) -> tuple[Token, ...]:
    """Split *pattern* into field and literal tokens.

    Raises:
        PatternError: On an unknown letter, an over-long run, or an
            unterminated quote.
    """
    tokens: list[Token] = []
    literal: list[str] = []

    def flush() -> None:
        if literal:
            tokens.append(Token(literal="".join(literal)))
            literal.clear()

    i = 0
    n = len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "'":
            if i + 1 < n and pattern[i + 1] == "'":
                literal.append("'")
                i += 2
                continue
            end = i + 1
            while True:
                if end >= n:
                    msg = f"Unterminated quote at index {i} in pattern {pattern!r}"
                    raise PatternError(msg, details={"pattern": pattern, "index": i})
                if pattern[end] == "'":
                    if end + 1 < n and pattern[end + 1] == "'":
                        literal.append("'")
                        end += 2
                        continue
                    break
                literal.append(pattern[end])
                end += 1
            i = end + 1
            continue
        if ch.isascii() and ch.isalpha():
            if ch not in FIELD_LETTERS:
                msg = f"Unknown pattern letter {ch!r} at index {i} in pattern {pattern!r}"
                raise PatternError(msg, details={"pattern": pattern, "index": i})
            j = i
            while j < n and pattern[j] == ch:
                j += 1
            count = j - i
            limit = _MAX_COUNT.get(ch)
            if limit is not None and count > limit:
                msg = f"Too many pattern letters {ch * count!r} in pattern {pattern!r}"
                raise PatternError(msg, details={"pattern": pattern, "index": i})
            flush()
            tokens.append(Token(letter=ch, count=count))
            i = j
            continue
        literal.append(ch)
        i += 1
    flush()
    return tuple(tokens)


def date_only_tokens(tokens: tuple[Token, ...]) -> tuple[Token, ...]:
    """Keep date fields and the literals whose neighbouring fields are all dates."""
    kept: list[Token] = []
    for idx, token in enumerate(tokens):
        if token.is_field:
            if token.is_date_field:
                kept.append(token)
            continue
        before = next((t for t in reversed(tokens[:idx]) if t.is_field), None)
        after = next((t for t in tokens[idx + 1 :] if t.is_field), None)
        neighbours = [t for t in (before, after) if t is not None]
        if neighbours and all(t.is_date_field for t in neighbours):
            kept.append(token)
    return tuple(kept)


class DateTimePattern:
    """A compiled canonical pattern.

    Attributes:
        pattern: The source pattern string.
        tokens: Compiled tokens of the full pattern.
        date_tokens: Tokens of the derived date-only sub-pattern.
    """

    def __init__(self, pattern: str) -> None:
        if not isinstance(pattern, str) or not pattern:
            raise PatternError("pattern must be a non-empty string", details={"pattern": pattern})
        self.pattern = pattern
        self.tokens = tokenize(pattern)
        self.date_tokens = date_only_tokens(self.tokens)

    def __repr__(self) -> str:
        return f"DateTimePattern({self.pattern!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DateTimePattern):
            return NotImplemented
        return self.pattern == other.pattern

    def __hash__(self) -> int:
        return hash(self.pattern)

    @property
    def date_pattern(self) -> str:
        """The date-only sub-pattern in pattern notation."""
        return "".join(t.render() for t in self.date_tokens)

    @property
    def has_time_fields(self) -> bool:
        return any(t.letter in TIME_LETTERS for t in self.tokens)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format(self, value: datetime) -> str:
        """Render *value* with this pattern."""
        return "".join(_format_token(t, value) for t in self.tokens)

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def match(self, text: str, *, date_only: bool = False) -> ParseAttempt:
        """Parse *text* as a full date-time, or as a date at midnight.

        The whole of *text* must be consumed.
        """
        tokens = self.date_tokens if date_only else self.tokens
        fields: dict[str, int] = {}
        pos = 0
        for token in tokens:
            if token.is_field:
                outcome = _read_field(token, text, pos, fields)
                if isinstance(outcome, ParseAttempt):
                    return outcome
                pos = outcome
            else:
                if not text.startswith(token.literal, pos):
                    return _failed(text, pos)
                pos += len(token.literal)

        if pos != len(text):
            return ParseAttempt(
                ok=False,
                message=f"Text {text!r} could not be parsed, unparsed text found at index {pos}",
                error_index=pos,
            )
        return _resolve(text, fields, date_only=date_only)


@lru_cache(maxsize=64)
def compile_pattern(pattern: str) -> DateTimePattern:
    """Compile and cache *pattern*."""
    return DateTimePattern(pattern)


# ----------------------------------------------------------------------
# Internal helpers
# ----------------------------------------------------------------------


def _format_token(token: Token, value: datetime) -> str:
    if not token.is_field:
        return token.literal
    letter, count = token.letter, token.count
    if letter in ("y", "u"):
        if count == 2:
            return f"{value.year % 100:02d}"
        return f"{value.year:0{count}d}"
    if letter == "M":
        if count == 3:
            return MONTH_ABBRS[value.month - 1]
        if count == 4:
            return MONTH_NAMES[value.month - 1]
        return f"{value.month:0{count}d}"
    if letter == "d":
        return f"{value.day:0{count}d}"
    if letter == "H":
        return f"{value.hour:0{count}d}"
    if letter == "h":
        return f"{value.hour % 12 or 12:0{count}d}"
    if letter == "a":
        return AMPM[value.hour // 12]
    if letter == "m":
        return f"{value.minute:0{count}d}"
    if letter == "s":
        return f"{value.second:0{count}d}"
    if letter == "S":
        return f"{value.microsecond:06d}".ljust(count, "0")[:count]
    # E
    if count == 4:
        return WEEKDAY_NAMES[value.weekday()]
    return WEEKDAY_ABBRS[value.weekday()]


def _failed(text: str, index: int, detail: str = "") -> ParseAttempt:
    message = f"Text {text!r} could not be parsed at index {index}"
    if detail:
        message = f"{message}: {detail}"
    return ParseAttempt(ok=False, message=message, error_index=index)


def _read_digits(text: str, pos: int, min_width: int, max_width: int) -> tuple[int, int] | None:
    end = pos
    while end < len(text) and end - pos < max_width and "0" <= text[end] <= "9":
        end += 1
    if end - pos < min_width:
        return None
    return int(text[pos:end]), end


def _read_name(text: str, pos: int, names: tuple[str, ...]) -> tuple[int, int] | None:
    """Match the longest of *names* at *pos*, case-insensitively."""
    best: tuple[int, int] | None = None
    for idx, name in enumerate(names):
        candidate = text[pos : pos + len(name)]
        if candidate.lower() == name.lower() and (best is None or len(name) > best[1] - pos):
            best = (idx, pos + len(name))
    return best


def _read_field(token: Token, text: str, pos: int, fields: dict[str, int]) -> int | ParseAttempt:
    """Read one field into *fields*; return the new offset or a failure."""
    letter, count = token.letter, token.count

    if letter in ("y", "u"):
        if count == 2:
            read = _read_digits(text, pos, 2, 2)
            if read is None:
                return _failed(text, pos)
            fields["year"] = 2000 + read[0]
            return read[1]
        read = _read_digits(text, pos, count, max(count, 4))
        if read is None:
            return _failed(text, pos)
        fields["year"] = read[0]
        return read[1]

    if letter == "M" and count >= 3:
        named = _read_name(text, pos, MONTH_NAMES if count == 4 else MONTH_ABBRS)
        if named is None:
            return _failed(text, pos)
        fields["month"] = named[0] + 1
        return named[1]

    if letter == "E":
        named = _read_name(text, pos, WEEKDAY_NAMES if count == 4 else WEEKDAY_ABBRS)
        if named is None:
            return _failed(text, pos)
        fields["weekday"] = named[0]
        return named[1]

    if letter == "a":
        named = _read_name(text, pos, AMPM)
        if named is None:
            return _failed(text, pos)
        fields["ampm"] = named[0]
        return named[1]

    if letter == "S":
        read = _read_digits(text, pos, count, count)
        if read is None:
            return _failed(text, pos)
        digits = text[pos : read[1]]
        fields["microsecond"] = int(digits.ljust(6, "0")[:6])
        return read[1]

    read = _read_digits(text, pos, count, 2)
    if read is None:
        return _failed(text, pos)
    name, low, high = _RANGES[letter]
    if not low <= read[0] <= high:
        return _failed(
            text,
            pos,
            f"Invalid value for {name} (valid values {low} - {high}): {read[0]}",
        )
    key = {"M": "month", "d": "day", "H": "hour", "h": "clock_hour", "m": "minute", "s": "second"}
    fields[key[letter]] = read[0]
    return read[1]


def _resolve(text: str, fields: dict[str, int], *, date_only: bool) -> ParseAttempt:
    """Combine parsed fields into a datetime."""
    missing = [name for name in ("year", "month", "day") if name not in fields]

    hour = fields.get("hour")
    if "clock_hour" in fields:
        if "ampm" not in fields:
            return _unresolved(text, "clock hour without AM/PM marker")
        hour = fields["clock_hour"] % 12 + 12 * fields["ampm"]
    elif hour is not None and "ampm" in fields and (hour >= 12) != bool(fields["ampm"]):
        return _unresolved(text, f"hour {hour} conflicts with {AMPM[fields['ampm']]}")

    if date_only:
        hour = 0
    elif hour is None:
        missing.append("hour")
    if missing:
        return _unresolved(text, f"missing {', '.join(missing)}")

    try:
        if date_only:
            value = datetime(fields["year"], fields["month"], fields["day"])
        else:
            value = datetime(
                fields["year"],
                fields["month"],
                fields["day"],
                hour,
                fields.get("minute", 0),
                fields.get("second", 0),
                fields.get("microsecond", 0),
            )
    except ValueError as exc:
        return _unresolved(text, str(exc))

    weekday = fields.get("weekday")
    if weekday is not None and weekday != value.weekday():
        return _unresolved(
            text,
            f"weekday {WEEKDAY_NAMES[weekday]} differs from "
            f"{WEEKDAY_NAMES[value.weekday()]} derived from {value.date().isoformat()}",
        )
    return ParseAttempt(ok=True, value=value)


def _unresolved(text: str, reason: str) -> ParseAttempt:
    return ParseAttempt(
        ok=False,
        message=f"Text {text!r} could not be parsed: Unable to obtain date-time: {reason}",
        error_index=0,
    )
