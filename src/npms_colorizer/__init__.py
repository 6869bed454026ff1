"""npms-colorizer: color npm dependency graphs by npms.io score.

Library use::

    fetcher = BatchScoreFetcher(HttpJsonTransport(http_client))
    outcome = await colorizer_for("quality").colors_for_modules(modules, fetcher)

``main()`` runs the same pipeline as an MCP server over stdio.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _distribution_version

from npms_colorizer.colorize.colorizer import ScoreColorizer, colorizer_for
from npms_colorizer.colorize.colors import HIGH_COLOR, LOW_COLOR, score_color
from npms_colorizer.models import Metric, Module, ScoreFetchResult, ScoreRecord
from npms_colorizer.scores.fetcher import BatchScoreFetcher
from npms_colorizer.scores.transport import HttpJsonTransport
from npms_colorizer.settings import FetcherSettings

__all__ = [
    "HIGH_COLOR",
    "LOW_COLOR",
    "BatchScoreFetcher",
    "FetcherSettings",
    "HttpJsonTransport",
    "Metric",
    "Module",
    "ScoreColorizer",
    "ScoreFetchResult",
    "ScoreRecord",
    "colorizer_for",
    "score_color",
]

_DISTRIBUTION = "npms-colorizer"
_LOCAL_VERSION_FALLBACK = "0.0.0+local"


def _resolve_version() -> str:
    """Installed distribution version, or a local marker when running from a checkout."""
    try:
        return _distribution_version(_DISTRIBUTION)
    except PackageNotFoundError:
        return _LOCAL_VERSION_FALLBACK


__version__ = _resolve_version()


def main() -> None:
    """Serve the colorize_modules and score_legend tools over stdio."""
    from npms_colorizer.server import mcp

    mcp.run(transport="stdio")
