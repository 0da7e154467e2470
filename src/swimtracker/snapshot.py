"""JSON snapshot of swimmers and time records.

The engine never stores anything; this is the CLI's store. A snapshot is a
single JSON document:

    {"swimmers": [...], "times": [...]}

Records use camelCase keys (swimmerId, poolSize, totalSeconds, ...) so files
exported from the browser tracker load unchanged. Changes return a new
Snapshot; nothing is mutated in place.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict

from swimtracker.logging import get_logger
from swimtracker.models.swimmer import Swimmer
from swimtracker.models.time_record import TimeRecord

logger = get_logger(__name__)


class Snapshot(BaseModel):
    """All swimmers and time records known to the host application."""

    model_config = ConfigDict(frozen=True)

    swimmers: list[Swimmer] = []
    times: list[TimeRecord] = []

    def find_swimmer(self, ref: str) -> Swimmer | None:
        """Find a swimmer by id, or by name (case-insensitive)."""
        for swimmer in self.swimmers:
            if swimmer.id == ref:
                return swimmer
        ref_lower = ref.strip().lower()
        for swimmer in self.swimmers:
            if swimmer.name.lower() == ref_lower:
                return swimmer
        return None

    def add_swimmer(self, swimmer: Swimmer) -> "Snapshot":
        return self.model_copy(update={"swimmers": [*self.swimmers, swimmer]})

    def add_time(self, record: TimeRecord) -> "Snapshot":
        return self.model_copy(update={"times": [*self.times, record]})

    def delete_time(self, record_id: str) -> "Snapshot":
        """Remove one time record. Unknown ids leave the snapshot unchanged."""
        return self.model_copy(
            update={"times": [t for t in self.times if t.id != record_id]}
        )

    def delete_swimmer(self, swimmer_id: str) -> "Snapshot":
        """Remove a swimmer. Their time records are kept."""
        return self.model_copy(
            update={"swimmers": [s for s in self.swimmers if s.id != swimmer_id]}
        )


def load_snapshot(path: Path) -> Snapshot:
    """Load a snapshot file; a missing file is an empty snapshot.

    Raises:
        pydantic.ValidationError: If the file content is not a valid snapshot
    """
    if not path.exists():
        logger.info("snapshot_missing", path=str(path))
        return Snapshot()

    snapshot = Snapshot.model_validate_json(path.read_text(encoding="utf-8"))
    logger.debug(
        "snapshot_loaded",
        path=str(path),
        swimmers=len(snapshot.swimmers),
        times=len(snapshot.times),
    )
    return snapshot


def save_snapshot(snapshot: Snapshot, path: Path) -> None:
    """Write a snapshot file, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(snapshot.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
    logger.debug(
        "snapshot_saved",
        path=str(path),
        swimmers=len(snapshot.swimmers),
        times=len(snapshot.times),
    )
