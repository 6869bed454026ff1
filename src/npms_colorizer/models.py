"""Domain models for npms-colorizer. Frozen dataclasses -- no mutation after creation."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import StrEnum

from npms_colorizer.errors import InvalidMetricError

# ─── Enumerations ─────────────────────────────────────────────


class Metric(StrEnum):
    OVERALL = "overall"
    QUALITY = "quality"
    POPULARITY = "popularity"
    MAINTENANCE = "maintenance"

    @classmethod
    def parse(cls, value: str | Metric) -> Metric:
        """Coerce a user-supplied metric name, raising InvalidMetricError if unknown."""
        try:
            return cls(str(value).strip().lower())
        except ValueError as exc:
            choices = ", ".join(m.value for m in cls)
            raise InvalidMetricError(
                f"Unknown metric '{value}'. Expected one of: {choices}."
            ) from exc

    def select(self, record: ScoreRecord) -> float:
        """Return the scalar this metric reads from a score record."""
        if self is Metric.OVERALL:
            return record.final
        return getattr(record.detail, self.value)


# ─── Module graph ─────────────────────────────────────────────


@dataclass(frozen=True, slots=True, eq=False)
class Module:
    """A package node in a dependency graph.

    Compared and hashed by identity: the same package can appear several
    times in a graph and every occurrence is colored on its own.
    """

    name: str
    version: str = ""


# ─── Score Models ─────────────────────────────────────────────


def _as_score(value: object) -> float:
    """Read a numeric score field, treating anything non-numeric as 0."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return 0.0
    return float(value)


@dataclass(frozen=True, slots=True)
class ScoreDetail:
    """Per-facet npms.io scores, each in [0, 1]."""

    quality: float = 0.0
    popularity: float = 0.0
    maintenance: float = 0.0


@dataclass(frozen=True, slots=True)
class ScoreRecord:
    """Score data for one package as returned by npms.io."""

    final: float
    detail: ScoreDetail = field(default_factory=ScoreDetail)

    @classmethod
    def from_npms(cls, payload: object) -> ScoreRecord | None:
        """Parse one value of an ``mget`` response.

        Expected shape::

            {"score": {"final": 0.9,
                       "detail": {"quality": .., "popularity": .., "maintenance": ..}}}

        Returns None when the payload carries no ``score`` block.
        """
        if not isinstance(payload, dict):
            return None
        score = payload.get("score")
        if not isinstance(score, dict) or not score:
            return None
        detail = score.get("detail")
        if not isinstance(detail, dict):
            detail = {}
        return cls(
            final=_as_score(score.get("final")),
            detail=ScoreDetail(
                quality=_as_score(detail.get("quality")),
                popularity=_as_score(detail.get("popularity")),
                maintenance=_as_score(detail.get("maintenance")),
            ),
        )


ScoreTable = dict[str, ScoreRecord]
ColorMap = dict[Module, str]


# ─── Result Models ────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class ScoreFetchResult:
    """Merged outcome of one batched score lookup.

    Unpacks as ``table, failed_batches``.
    """

    table: ScoreTable = field(default_factory=dict)
    failed_batches: int = 0
    total_batches: int = 0

    def __iter__(self) -> Iterator[object]:
        yield self.table
        yield self.failed_batches

    @property
    def all_failed(self) -> bool:
        return self.total_batches > 0 and self.failed_batches == self.total_batches

    def failure_message(self) -> str | None:
        """Human-readable warning for the notification layer, or None if nothing failed."""
        if not self.failed_batches:
            return None
        return f"{self.failed_batches} of {self.total_batches} NPMS.io requests failed"


@dataclass(frozen=True, slots=True)
class ColorizeOutcome:
    """Colors for a module list plus the fetch result they were derived from."""

    colors: ColorMap
    fetch: ScoreFetchResult
