"""Short human-readable durations for elapsed-time display."""

import math

SECOND = 1000
MINUTE = SECOND * 60
HOUR = MINUTE * 60
DAY = HOUR * 24

_UNITS = ((DAY, "d"), (HOUR, "h"), (MINUTE, "m"), (SECOND, "s"))


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def humanize(ms: float) -> str:
    """Format a millisecond count using its largest whole unit.

    >>> humanize(250)
    '250ms'
    >>> humanize(1500)
    '2s'
    """
    magnitude = abs(ms)
    for size, suffix in _UNITS:
        if magnitude >= size:
            return f"{_round_half_up(ms / size)}{suffix}"
    return f"{_round_half_up(ms)}ms"
