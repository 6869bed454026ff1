"""Ports: JSON transport and batched score lookup."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from npms_colorizer.models import Module, ScoreFetchResult


class ScoreTransportPort(Protocol):
    """Port for POSTing a JSON body and reading back a parsed JSON object."""

    async def post_json(
        self,
        url: str,
        payload: object,
        *,
        timeout: float,
    ) -> dict[str, object]:
        """Send *payload* and return the decoded response.

        Raises ScoreFetchError on any transport, status or decoding failure.
        """
        ...


class ScoreFetcherPort(Protocol):
    """Port for resolving scores for a list of modules."""

    async def fetch_scores(self, modules: Sequence[Module]) -> ScoreFetchResult:
        """Look up scores for every distinct module name."""
        ...
