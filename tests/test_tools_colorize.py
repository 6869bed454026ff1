"""Tests for the colorize_modules and score_legend tools (tools/colorize.py)."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from npms_colorizer.colorize.colors import HIGH_COLOR, LOW_COLOR, score_color
from npms_colorizer.models import ScoreDetail, ScoreFetchResult, ScoreRecord
from npms_colorizer.server import AppContext
from npms_colorizer.tools.colorize import _fetcher_from, colorize_modules, score_legend

# --- Helpers ---------------------------------------------------------------


def _record(final: float = 0.9, maintenance: float = 0.4) -> ScoreRecord:
    return ScoreRecord(
        final=final,
        detail=ScoreDetail(quality=0.5, popularity=0.5, maintenance=maintenance),
    )


def _make_ctx(fetch: ScoreFetchResult | Exception) -> MagicMock:
    """Build a mock Context whose lifespan holds an AppContext with a stub fetcher."""
    fetcher = AsyncMock()
    if isinstance(fetch, Exception):
        fetcher.fetch_scores = AsyncMock(side_effect=fetch)
    else:
        fetcher.fetch_scores = AsyncMock(return_value=fetch)

    ctx = MagicMock()
    ctx.request_context.lifespan_context = AppContext(http_client=MagicMock(), fetcher=fetcher)
    ctx.info = AsyncMock()
    ctx.warning = AsyncMock()
    ctx.error = AsyncMock()
    return ctx


# === colorize_modules =======================================================


class TestColorizeModulesSuccess:
    async def test_one_entry_per_input_module(self):
        ctx = _make_ctx(ScoreFetchResult(table={"lodash": _record()}, total_batches=1))

        result = await colorize_modules(["lodash", "ghost", "lodash"], ctx)

        assert result["success"] is True
        assert result["title"] == "NPMS.io Score"
        assert result["metric"] == "overall"
        assert result["modules"] == [
            {"name": "lodash", "score": 0.9, "color": score_color(0.9)},
            {"name": "ghost", "score": None, "color": None},
            {"name": "lodash", "score": 0.9, "color": score_color(0.9)},
        ]
        assert result["colored"] == 2
        assert result["failed_batches"] == 0
        assert result["total_batches"] == 1
        assert "warning" not in result
        ctx.warning.assert_not_awaited()

    async def test_metric_argument_selects_score(self):
        ctx = _make_ctx(
            ScoreFetchResult(table={"lodash": _record(maintenance=0.4)}, total_batches=1)
        )

        result = await colorize_modules(["lodash"], ctx, metric="maintenance")

        assert result["metric"] == "maintenance"
        assert result["modules"][0] == {
            "name": "lodash",
            "score": 0.4,
            "color": score_color(0.4),
        }

    async def test_zero_score_reported_but_uncolored(self):
        ctx = _make_ctx(ScoreFetchResult(table={"stale": _record(final=0.0)}, total_batches=1))

        result = await colorize_modules(["stale"], ctx)

        assert result["modules"] == [{"name": "stale", "score": 0.0, "color": None}]
        assert result["colored"] == 0


class TestColorizeModulesFailures:
    async def test_partial_failure_warns(self):
        ctx = _make_ctx(
            ScoreFetchResult(table={"lodash": _record()}, failed_batches=1, total_batches=2)
        )

        result = await colorize_modules(["lodash", "left-pad"], ctx)

        assert result["success"] is True
        assert result["warning"] == "1 of 2 NPMS.io requests failed"
        ctx.warning.assert_awaited_once_with("1 of 2 NPMS.io requests failed")

    async def test_unknown_metric_returns_error(self):
        ctx = _make_ctx(ScoreFetchResult())

        result = await colorize_modules(["lodash"], ctx, metric="downloads")

        assert result["success"] is False
        assert "downloads" in result["error"]
        fetcher = ctx.request_context.lifespan_context.fetcher
        fetcher.fetch_scores.assert_not_awaited()

    async def test_unexpected_exception_reported_as_internal_error(self):
        ctx = _make_ctx(RuntimeError("boom"))

        result = await colorize_modules(["lodash"], ctx)

        assert result == {"success": False, "error": "Internal error: RuntimeError"}
        ctx.error.assert_awaited_once()

    async def test_wrong_lifespan_context_is_internal_error(self):
        ctx = _make_ctx(ScoreFetchResult())
        ctx.request_context.lifespan_context = object()

        result = await colorize_modules(["lodash"], ctx)

        assert result == {"success": False, "error": "Internal error: TypeError"}


# === score_legend ===========================================================


class TestScoreLegend:
    async def test_returns_endpoint_colors(self):
        result = await score_legend("quality")

        assert result == {
            "success": True,
            "title": "NPMS.io Score (Quality)",
            "metric": "quality",
            "low": LOW_COLOR,
            "high": HIGH_COLOR,
        }

    async def test_unknown_metric(self):
        result = await score_legend("stars")

        assert result["success"] is False


# === lifespan lookup ========================================================


class TestFetcherLookup:
    def test_returns_fetcher_from_app_context(self):
        ctx = _make_ctx(ScoreFetchResult())

        fetcher = _fetcher_from(ctx)

        assert fetcher is ctx.request_context.lifespan_context.fetcher

    def test_rejects_foreign_lifespan_context(self):
        ctx = MagicMock()
        ctx.request_context.lifespan_context = {"fetcher": object()}

        with pytest.raises(TypeError, match="got dict"):
            _fetcher_from(ctx)
