"""Batched score lookup against the npms.io ``mget`` endpoint."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from npms_colorizer.models import Module, ScoreFetchResult, ScoreRecord, ScoreTable
from npms_colorizer.scores.base import ScoreTransportPort
from npms_colorizer.settings import FetcherSettings

logger = logging.getLogger(__name__)


def unique_names(modules: Sequence[Module]) -> list[str]:
    """Distinct module names in first-seen order."""
    return list(dict.fromkeys(m.name for m in modules))


def batch_names(names: Sequence[str], limit: int) -> list[list[str]]:
    """Split *names* into consecutive groups of at most *limit* items."""
    if limit < 1:
        raise ValueError(f"limit must be at least 1, got {limit}")
    return [list(names[i : i + limit]) for i in range(0, len(names), limit)]


def parse_mget_response(data: dict[str, object]) -> ScoreTable:
    """Convert an ``mget`` response body into a score table.

    Names whose value carries no score block are left out.
    """
    table: ScoreTable = {}
    for name, payload in data.items():
        record = ScoreRecord.from_npms(payload)
        if record is not None:
            table[name] = record
    return table


@dataclass
class BatchScoreFetcher:
    """Resolves npms.io scores for many modules with one request per batch.

    Batches are sent concurrently and joined with
    ``asyncio.gather(return_exceptions=True)``: a failed or slow batch
    never prevents the others from being merged.

    Args:
        transport: JSON transport used for each batch request.
        settings: Endpoint, batch size and per-request timeout.
    """

    transport: ScoreTransportPort
    settings: FetcherSettings = field(default_factory=FetcherSettings)

    async def fetch_scores(self, modules: Sequence[Module]) -> ScoreFetchResult:
        """Look up scores for every distinct module name.

        Args:
            modules: Modules to score. Repeated names are requested once.

        Returns:
            ``ScoreFetchResult`` holding the merged table and the number of
            batches that failed. Never raises because a batch failed.
        """
        batches = batch_names(unique_names(modules), self.settings.bulk_limit)
        if not batches:
            return ScoreFetchResult()

        results = await asyncio.gather(
            *(self._fetch_batch(batch) for batch in batches),
            return_exceptions=True,
        )

        table: ScoreTable = {}
        failed = 0
        for batch, result in zip(batches, results, strict=True):
            if isinstance(result, BaseException):
                failed += 1
                logger.warning(
                    "npms.io batch of %d names (starting with '%s') failed: %s",
                    len(batch),
                    batch[0],
                    result,
                )
                continue
            table.update(result)

        logger.debug(
            "Fetched npms.io scores: %d batches, %d failed, %d names resolved",
            len(batches),
            failed,
            len(table),
        )
        return ScoreFetchResult(table=table, failed_batches=failed, total_batches=len(batches))

    async def _fetch_batch(self, names: list[str]) -> ScoreTable:
        data = await self.transport.post_json(
            self.settings.api_url,
            names,
            timeout=self.settings.timeout_seconds,
        )
        return parse_mget_response(data)
