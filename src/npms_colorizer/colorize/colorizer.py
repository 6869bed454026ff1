"""Colorize modules by one npms.io metric."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from npms_colorizer.colorize.colors import legend_endpoints, score_color
from npms_colorizer.models import ColorizeOutcome, ColorMap, Metric, Module, ScoreTable
from npms_colorizer.scores.base import ScoreFetcherPort


@dataclass(frozen=True, slots=True)
class ScoreColorizer:
    """Turns a score table into per-module colors for a fixed metric."""

    title: str
    metric: Metric

    def __post_init__(self) -> None:
        # Frozen: bypass __setattr__ to store the coerced value.
        object.__setattr__(self, "metric", Metric.parse(self.metric))

    def colorize(self, modules: Sequence[Module], table: ScoreTable) -> ColorMap:
        """Map each module to the color of its selected score.

        Every module instance gets its own entry, so duplicates sharing a
        name are all colored. Modules with no record, or whose score is
        zero, are left out.
        """
        colors: ColorMap = {}
        for module in modules:
            record = table.get(module.name)
            if record is None:
                continue
            score = self.metric.select(record)
            if not score:
                continue
            colors[module] = score_color(score)
        return colors

    async def colors_for_modules(
        self,
        modules: Sequence[Module],
        fetcher: ScoreFetcherPort,
    ) -> ColorizeOutcome:
        """Fetch scores for *modules* and colorize them in one step."""
        fetch = await fetcher.fetch_scores(modules)
        return ColorizeOutcome(colors=self.colorize(modules, fetch.table), fetch=fetch)

    def legend(self) -> dict[str, str]:
        low, high = legend_endpoints()
        return {"title": self.title, "metric": self.metric.value, "low": low, "high": high}


NPMS_OVERALL = ScoreColorizer("NPMS.io Score", Metric.OVERALL)
NPMS_QUALITY = ScoreColorizer("NPMS.io Score (Quality)", Metric.QUALITY)
NPMS_POPULARITY = ScoreColorizer("NPMS.io Score (Popularity)", Metric.POPULARITY)
NPMS_MAINTENANCE = ScoreColorizer("NPMS.io Score (Maintenance)", Metric.MAINTENANCE)

_BY_METRIC: dict[Metric, ScoreColorizer] = {
    c.metric: c for c in (NPMS_OVERALL, NPMS_QUALITY, NPMS_POPULARITY, NPMS_MAINTENANCE)
}


def colorizer_for(metric: str | Metric) -> ScoreColorizer:
    """Return the preconfigured colorizer for a metric name.

    Raises InvalidMetricError for unknown names.
    """
    return _BY_METRIC[Metric.parse(metric)]
