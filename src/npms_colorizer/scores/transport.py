"""HTTP transport for the npms.io bulk endpoint.

Every failure mode of a single request -- connection error, timeout,
non-2xx status, undecodable or non-object body -- surfaces as
``ScoreFetchError`` so callers handle one exception type per batch.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

import httpx

from npms_colorizer.errors import ScoreFetchError

_JSON_HEADERS = {"Content-Type": "application/json", "Accept": "application/json"}


@dataclass
class HttpJsonTransport:
    """Adapter for ScoreTransportPort -- holds an httpx client."""

    http: httpx.AsyncClient

    async def post_json(
        self,
        url: str,
        payload: object,
        *,
        timeout: float,
    ) -> dict[str, object]:
        """POST *payload* as JSON and return the decoded object body.

        Args:
            url: Endpoint to call.
            payload: JSON-serialisable request body.
            timeout: Upper bound in seconds for the whole request.

        Returns:
            The response body parsed as a JSON object.

        Raises:
            ScoreFetchError: On timeout, transport or HTTP status errors,
                or when the body is not a JSON object.
        """
        try:
            # httpx timeouts apply per connect/read/write step; wait_for bounds the total.
            response = await asyncio.wait_for(
                self.http.post(url, json=payload, headers=_JSON_HEADERS, timeout=timeout),
                timeout=timeout,
            )
            response.raise_for_status()
        except (TimeoutError, httpx.TimeoutException) as exc:
            raise ScoreFetchError(f"Request to {url} timed out after {timeout:g}s") from exc
        except httpx.HTTPError as exc:
            raise ScoreFetchError(f"Request to {url} failed: {exc}") from exc

        try:
            data = response.json()
        except ValueError as exc:
            raise ScoreFetchError(f"Malformed JSON from {url}: {exc}") from exc

        if not isinstance(data, dict):
            raise ScoreFetchError(
                f"Expected a JSON object from {url}, got {type(data).__name__}"
            )
        return data
