"""MCP server that colors npm package graphs by npms.io score."""

from __future__ import annotations

import os
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

import httpx
from mcp.server.fastmcp import FastMCP
from mcp.types import ToolAnnotations

from npms_colorizer.scores.base import ScoreFetcherPort
from npms_colorizer.scores.fetcher import BatchScoreFetcher
from npms_colorizer.scores.transport import HttpJsonTransport
from npms_colorizer.settings import NPMS_MGET_URL, FetcherSettings
from npms_colorizer.tools.colorize import colorize_modules, score_legend


@dataclass(frozen=True, slots=True)
class AppContext:
    """Shared state across all tool invocations."""

    http_client: httpx.AsyncClient
    fetcher: ScoreFetcherPort


def load_settings() -> FetcherSettings:
    """Build fetcher settings, honouring an ``NPMS_API_URL`` override."""
    api_url = os.environ.get("NPMS_API_URL", "").strip() or NPMS_MGET_URL
    return FetcherSettings(api_url=api_url)


@asynccontextmanager
async def app_lifespan(server: FastMCP) -> AsyncIterator[AppContext]:
    """Manage shared adapter lifecycle -- the composition root."""
    settings = load_settings()
    async with httpx.AsyncClient(
        timeout=httpx.Timeout(settings.timeout_seconds, connect=settings.timeout_seconds),
        follow_redirects=True,
        limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
    ) as http_client:
        fetcher = BatchScoreFetcher(
            transport=HttpJsonTransport(http_client),
            settings=settings,
        )
        yield AppContext(http_client=http_client, fetcher=fetcher)


mcp = FastMCP(
    "npms-colorizer",
    instructions=(
        "npms-colorizer colors npm packages by their npms.io score.\n\n"
        "- **colorize_modules** -- pass the package names of every node in a "
        "dependency graph (repeats allowed) and a metric: overall, quality, "
        "popularity or maintenance. Each node gets a CSS oklch() color from red "
        "(score 0) to green (score 1), or null when npms.io has no score.\n"
        "- **score_legend** -- the low/high colors for drawing a legend.\n\n"
        "If the result carries a 'warning', some npms.io requests failed and "
        "those packages are uncolored; tell the user rather than retrying blindly."
    ),
    lifespan=app_lifespan,
)

mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))(colorize_modules)
mcp.tool(annotations=ToolAnnotations(readOnlyHint=True))(score_legend)
