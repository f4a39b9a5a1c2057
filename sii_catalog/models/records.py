"""Record dataclasses for the engine/transmission catalog.

Engine and transmission records are built one per definition file. A model
folder becomes a ``ModelEntry`` only when it yields at least one of each.
Record builders return a tagged ``BuildResult`` instead of signalling failure
through empty strings.
"""

from dataclasses import dataclass, field

# Version 1 had no rpm limit; version 2 carries it as an optional field.
RECORD_SCHEMA_VERSION = 2


@dataclass(frozen=True)
class EngineRecord:
    """A single engine definition."""

    name: str
    rated_power: str  # first token of the first info[] entry, e.g. "450"
    torque: str
    source_path: str
    rpm_limit: str | None = None


@dataclass(frozen=True)
class TransmissionRecord:
    """A single transmission definition."""

    name: str
    speed_count: int
    has_retarder: bool
    ratio_range: str  # "<first> - <last>" forward ratio
    source_path: str


@dataclass(frozen=True)
class Complete:
    """Builder result carrying a finished record."""

    record: EngineRecord | TransmissionRecord


@dataclass(frozen=True)
class Incomplete:
    """Builder result for a file that did not yield a record."""

    reason: str


BuildResult = Complete | Incomplete


@dataclass
class ModelEntry:
    """All engines and transmissions found for one brand.model folder."""

    brand: str
    model: str
    engines: list[EngineRecord] = field(default_factory=list)
    transmissions: list[TransmissionRecord] = field(default_factory=list)


@dataclass(frozen=True)
class SkippedItem:
    """A file or folder that produced nothing, with the reason why."""

    path: str
    reason: str


@dataclass
class ScanReport:
    """Outcome of scanning one definition root."""

    entries: list[ModelEntry] = field(default_factory=list)
    skipped: list[SkippedItem] = field(default_factory=list)
    folders_seen: int = 0
    files_parsed: int = 0
    engines_found: int = 0
    transmissions_found: int = 0

    def skip(self, path: str, reason: str) -> None:
        self.skipped.append(SkippedItem(path=path, reason=reason))
