"""Conversion between time parts, display strings and total seconds."""

import re

from swimtracker.services.entry_schemas import FieldError, RaceTime, ValidationError

# Matches [M:]SS.cc, centiseconds may be one or two digits
TIME_PATTERN = re.compile(r"^(?:(\d+):)?(\d{1,2})\.(\d{1,2})$")


def check_time_parts(
    minutes: int | None, seconds: int | None, centiseconds: int | None
) -> list[FieldError]:
    """Collect range problems with time parts. Nothing is clamped."""
    errors: list[FieldError] = []
    if minutes is not None and minutes < 0:
        errors.append(FieldError(field="minutes", message="Minutes must not be negative"))
    if seconds is None:
        errors.append(FieldError(field="seconds", message="Seconds are required"))
    elif not 0 <= seconds < 60:
        errors.append(
            FieldError(field="seconds", message=f"Invalid seconds value: {seconds} (must be 0-59)")
        )
    if centiseconds is not None and not 0 <= centiseconds < 100:
        errors.append(
            FieldError(
                field="centiseconds",
                message=f"Invalid centiseconds value: {centiseconds} (must be 0-99)",
            )
        )
    return errors


def compute_time_from_parts(
    minutes: int | None = 0,
    seconds: int | None = None,
    centiseconds: int | None = 0,
) -> RaceTime:
    """Build the display string and total seconds for a race time.

    The minutes segment is only shown when minutes > 0; seconds and
    centiseconds are always two digits.

    Examples:
        (1, 5, 30) -> "1:05.30", 65.30
        (0, 59, 99) -> "59.99", 59.99

    Args:
        minutes: Whole minutes, None treated as 0
        seconds: Seconds 0-59, required
        centiseconds: Hundredths 0-99, None treated as 0

    Returns:
        RaceTime with display and total_seconds

    Raises:
        ValidationError: If seconds is missing or any part is out of range
    """
    errors = check_time_parts(minutes, seconds, centiseconds)
    if errors:
        raise ValidationError(errors)

    minutes = minutes or 0
    centiseconds = centiseconds or 0

    prefix = f"{minutes}:" if minutes > 0 else ""
    display = f"{prefix}{seconds:02d}.{centiseconds:02d}"
    total_seconds = minutes * 60 + seconds + centiseconds / 100
    return RaceTime(display=display, total_seconds=total_seconds)


def split_time_string(time_str: str) -> tuple[int, int, int]:
    """Split a typed time such as "59.45" or "1:05.3" into its parts.

    A single centisecond digit means tenths ("1:05.3" is 1:05.30).

    Returns:
        Tuple of (minutes, seconds, centiseconds), not range checked

    Raises:
        ValidationError: If the text is not [M:]SS.cc
    """
    match = TIME_PATTERN.match(time_str.strip())
    if not match:
        raise ValidationError.single(
            "time", f"Invalid time format: '{time_str}'. Expected 'SS.cc' or 'M:SS.cc'"
        )

    minutes_str, seconds_str, centiseconds_str = match.groups()
    if len(centiseconds_str) == 1:
        centiseconds_str += "0"

    return int(minutes_str) if minutes_str else 0, int(seconds_str), int(centiseconds_str)


def parse_time_string(time_str: str) -> RaceTime:
    """Parse a typed time into a RaceTime.

    Raises:
        ValidationError: If the text is malformed or a part is out of range
    """
    minutes, seconds, centiseconds = split_time_string(time_str)
    return compute_time_from_parts(minutes, seconds, centiseconds)
