"""Formatting of YouTube ``contentDetails.duration`` values."""

import re

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

# Largest duration an int64 nanosecond count can hold
MAX_DURATION = 2**63 - 1

UNITS = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,
    "μs": MICROSECOND,
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

# "ms" and the micro units must be tried before "m" and "s"
_TERM = r"(?:(\d+)(?:\.(\d*))?|\.(\d+))(ns|us|µs|μs|ms|h|m|s)"
TERM_PATTERN = re.compile(_TERM)
DURATION_PATTERN = re.compile(rf"(?:{_TERM})+")


def parse_nanoseconds(raw: str) -> int:
    """Return the total number of nanoseconds in a ``PT...`` duration.

    Every ``pt`` is removed (case-insensitively) and the remainder must be a
    run of ``<number><unit>`` terms such as ``1h2m3s`` or ``1.5s``. A bare
    ``0`` is zero. Anything else, day designators like ``P1D`` included,
    raises ``ValueError``, as does a total beyond ``MAX_DURATION``.
    """
    text = raw.lower().replace("pt", "")
    if text == "0":
        return 0
    if not DURATION_PATTERN.fullmatch(text):
        raise ValueError(f"invalid duration: {raw!r}")

    total = 0
    for whole, fraction, bare_fraction, unit in TERM_PATTERN.findall(text):
        scale = UNITS[unit]
        # digits past int64 precision are ignored
        digits = (fraction or bare_fraction)[:18]
        total += int(whole or 0) * scale
        if digits:
            total += int(float(int(digits)) * (scale / 10 ** len(digits)))
        if total > MAX_DURATION:
            raise ValueError(f"invalid duration: {raw!r}")
    return total


def format_duration(raw: str) -> str:
    """Format an ISO-8601 video duration as ``H:MM:SS`` or ``M:SS``.

    Unparseable or out-of-range input is treated as a zero duration.

    Examples:
        >>> format_duration("PT2M5S")
        '2:05'
        >>> format_duration("PT1H2M3S")
        '1:02:03'
        >>> format_duration("")
        '0:00'
    """
    try:
        total = parse_nanoseconds(raw)
    except ValueError:
        total = 0

    hours = total // HOUR
    minutes = total // MINUTE % 60
    seconds = total // SECOND % 60

    if hours > 0:
        return f"{hours}:{minutes:02d}:{seconds:02d}"
    return f"{minutes}:{seconds:02d}"
