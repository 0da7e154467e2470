"""Turn a validated time entry into a scored TimeRecord."""

from collections.abc import Iterable

from swimtracker.logging import get_logger
from swimtracker.models.swimmer import Swimmer
from swimtracker.models.time_record import TimeRecord
from swimtracker.services.entry_schemas import FieldError, TimeEntry, ValidationError
from swimtracker.services.scoring import compute_placement_points, compute_standardized_points
from swimtracker.services.time_converter import check_time_parts, compute_time_from_parts

logger = get_logger(__name__)


def validate_time_entry(
    entry: TimeEntry,
    swimmers: Iterable[Swimmer] | None = None,
) -> list[FieldError]:
    """Check a time entry, returning every problem found.

    Args:
        entry: The submitted entry
        swimmers: Optional roster; when given, swimmer_id must be in it

    Returns:
        Field errors, empty if the entry is valid
    """
    errors: list[FieldError] = []

    if not entry.swimmer_id.strip():
        errors.append(FieldError(field="swimmer_id", message="Please select a swimmer"))
    elif swimmers is not None and entry.swimmer_id not in {s.id for s in swimmers}:
        errors.append(
            FieldError(field="swimmer_id", message=f"Unknown swimmer: {entry.swimmer_id}")
        )

    if not entry.competition.strip():
        errors.append(FieldError(field="competition", message="Competition name is required"))

    if entry.placement < 1:
        errors.append(
            FieldError(field="placement", message=f"Invalid placement: {entry.placement}")
        )

    errors.extend(check_time_parts(entry.minutes, entry.seconds, entry.centiseconds))
    return errors


def build_time_record(
    entry: TimeEntry,
    swimmers: Iterable[Swimmer] | None = None,
) -> TimeRecord:
    """Validate an entry and build its TimeRecord with points computed.

    Args:
        entry: The submitted entry
        swimmers: Optional roster to check swimmer_id against

    Returns:
        A new TimeRecord with a fresh id

    Raises:
        ValidationError: If any field is missing or out of range
    """
    errors = validate_time_entry(entry, swimmers)
    if errors:
        logger.info("time_entry_rejected", fields=[e.field for e in errors])
        raise ValidationError(errors)

    race_time = compute_time_from_parts(entry.minutes, entry.seconds, entry.centiseconds)
    if race_time.total_seconds <= 0:
        raise ValidationError.single("seconds", "Time must be greater than zero")

    record = TimeRecord(
        swimmer_id=entry.swimmer_id,
        distance=entry.distance,
        style=entry.style,
        pool_size=entry.pool_size,
        time=race_time.display,
        total_seconds=race_time.total_seconds,
        placement=entry.placement,
        points=compute_placement_points(entry.placement),
        fina_points=compute_standardized_points(
            race_time.total_seconds, entry.style, entry.distance, entry.pool_size
        ),
        date=entry.date,
        competition=entry.competition.strip(),
        competition_location=entry.competition_location.strip(),
    )
    logger.info(
        "time_recorded",
        swimmer_id=record.swimmer_id,
        event_label=record.event_key.label,
        time=record.time,
        points=record.points,
        fina_points=record.fina_points,
    )
    return record
