"""Date formatting for ``date:`` expressions.

Patterns use the SimpleDateFormat letter conventions familiar from routing
configurations (``yyyyMMdd``, ``HH:mm:ss.SSS``, ``EEE, d MMM yyyy``), not
strftime directives.

Supported letters:
- G era, y year, M month, d day of month, D day of year
- E day name, u day number of week (1 = Monday), F day of week in month
- w week of year (ISO), W week of month
- a am/pm marker, H hour 0-23, k hour 1-24, K hour 0-11, h hour 1-12
- m minute, s second, S millisecond
- z time zone name, Z RFC 822 offset (-0800), X ISO 8601 offset (-08, -0800, -08:00)

Text between single quotes is copied verbatim; ``''`` yields a single quote.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum, auto
from functools import lru_cache


class DateFormatError(ValueError):
    """Invalid date pattern."""

    def __init__(self, message: str, pattern: str, position: int):
        self.pattern = pattern
        self.position = position
        super().__init__(f"{message} in date pattern '{pattern}' at position {position}")


class DateTokenType(Enum):
    """Types of tokens in a date pattern."""

    FIELD = auto()       # run of one pattern letter, e.g. yyyy
    LITERAL = auto()     # quoted or unquoted literal text


@dataclass(frozen=True)
class DateToken:
    """A single token of a date pattern.

    Attributes:
        type: The token type
        value: Literal text, or the repeated pattern letter for fields
        position: Character position in the pattern
    """

    type: DateTokenType
    value: str
    position: int

    @property
    def letter(self) -> str:
        return self.value[0]

    @property
    def count(self) -> int:
        return len(self.value)


# Order matters: the escaped quote must win over quoted text
TOKEN_PATTERNS = [
    (re.compile(r"''"), DateTokenType.LITERAL),
    (re.compile(r"'(?:[^']|'')+'"), DateTokenType.LITERAL),
    (re.compile(r"([A-Za-z])\1*"), DateTokenType.FIELD),
    (re.compile(r"[^A-Za-z']+"), DateTokenType.LITERAL),
]

FIELD_LETTERS = frozenset("GyMdDEuFwWaHkKhmsSzZX")

_MONTHS = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]
_DAYS = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"]


@lru_cache(maxsize=256)
def tokenize(pattern: str) -> tuple[DateToken, ...]:
    """Split a date pattern into tokens.

    Raises:
        DateFormatError: On an unterminated quote or an unknown pattern letter
    """
    tokens: list[DateToken] = []
    position = 0

    while position < len(pattern):
        for regex, token_type in TOKEN_PATTERNS:
            match = regex.match(pattern, position)
            if not match:
                continue

            text = match.group()
            if token_type == DateTokenType.FIELD:
                if text[0] not in FIELD_LETTERS:
                    raise DateFormatError(
                        f"Illegal pattern character '{text[0]}'", pattern, position
                    )
                tokens.append(DateToken(token_type, text, position))
            elif text == "''":
                tokens.append(DateToken(token_type, "'", position))
            elif text.startswith("'"):
                tokens.append(DateToken(token_type, text[1:-1].replace("''", "'"), position))
            else:
                tokens.append(DateToken(token_type, text, position))

            position = match.end()
            break
        else:
            raise DateFormatError("Unterminated quote", pattern, position)

    return tuple(tokens)


def now() -> datetime:
    """Return the current local time, timezone-aware."""
    return datetime.now().astimezone()


def format_date(value: date | datetime, pattern: str) -> str:
    """Format a date or datetime using a SimpleDateFormat-style pattern.

    Naive datetimes are treated as local time. Plain dates format as midnight.

    Example:
        format_date(datetime(2024, 3, 5, 14, 7), "yyyyMMdd-HHmm")
        # "20240305-1407"
    """
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        value = value.astimezone()

    return "".join(
        _format_field(value, token) if token.type == DateTokenType.FIELD else token.value
        for token in tokenize(pattern)
    )


# -----------------------------------------------------------------------------
# Field formatting
# -----------------------------------------------------------------------------


def _pad(number: int, count: int) -> str:
    return str(number).zfill(count)


def _text(full: str, count: int) -> str:
    return full if count >= 4 else full[:3]


def _offset(value: datetime, count: int, iso: bool) -> str:
    offset = value.utcoffset()
    minutes = int(offset.total_seconds() // 60) if offset is not None else 0
    if iso and minutes == 0:
        return "Z"

    sign = "-" if minutes < 0 else "+"
    hours, mins = divmod(abs(minutes), 60)
    if iso and count == 1:
        return f"{sign}{hours:02d}"
    if iso and count >= 3:
        return f"{sign}{hours:02d}:{mins:02d}"
    return f"{sign}{hours:02d}{mins:02d}"


def _format_field(value: datetime, token: DateToken) -> str:
    letter = token.letter
    count = token.count

    if letter == "G":
        return "AD"
    if letter == "y":
        if count == 2:
            return _pad(value.year % 100, 2)
        return _pad(value.year, count)
    if letter == "M":
        if count >= 3:
            return _text(_MONTHS[value.month - 1], count)
        return _pad(value.month, count)
    if letter == "d":
        return _pad(value.day, count)
    if letter == "D":
        return _pad(value.timetuple().tm_yday, count)
    if letter == "E":
        return _text(_DAYS[value.weekday()], count)
    if letter == "u":
        return _pad(value.isoweekday(), count)
    if letter == "F":
        return _pad((value.day - 1) // 7 + 1, count)
    if letter == "w":
        return _pad(value.isocalendar()[1], count)
    if letter == "W":
        first_weekday = value.replace(day=1).weekday()
        return _pad((value.day - 1 + first_weekday) // 7 + 1, count)
    if letter == "a":
        return "AM" if value.hour < 12 else "PM"
    if letter == "H":
        return _pad(value.hour, count)
    if letter == "k":
        return _pad(value.hour or 24, count)
    if letter == "K":
        return _pad(value.hour % 12, count)
    if letter == "h":
        return _pad(value.hour % 12 or 12, count)
    if letter == "m":
        return _pad(value.minute, count)
    if letter == "s":
        return _pad(value.second, count)
    if letter == "S":
        return _pad(value.microsecond // 1000, count)
    if letter == "z":
        return value.tzname() or ""
    if letter == "Z":
        return _offset(value, count, iso=False)
    # X
    return _offset(value, count, iso=True)
