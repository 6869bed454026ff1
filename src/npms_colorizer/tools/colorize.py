"""colorize_modules and score_legend tools -- npms.io colors for package names."""

from __future__ import annotations

from mcp.server.fastmcp import Context

from npms_colorizer.colorize.colorizer import colorizer_for
from npms_colorizer.errors import NpmsColorizerError
from npms_colorizer.models import Module
from npms_colorizer.scores.base import ScoreFetcherPort


def _fetcher_from(ctx: Context) -> ScoreFetcherPort:
    """Return the shared score fetcher held by the server lifespan.

    Raises TypeError when the lifespan did not yield an AppContext.
    """
    from npms_colorizer.server import AppContext

    app = ctx.request_context.lifespan_context
    if not isinstance(app, AppContext):
        raise TypeError(
            f"Expected AppContext in lifespan_context, got {type(app).__name__}"
        )
    return app.fetcher


async def colorize_modules(
    modules: list[str],
    ctx: Context,
    metric: str = "overall",
) -> dict[str, object]:
    """Color npm packages by their npms.io score.

    Looks up every distinct package name on npms.io (batched, requests run
    concurrently) and maps the chosen score onto a red-to-green color.

    Args:
        modules: npm package names, one per graph node. Repeats are allowed
            and each occurrence gets its own entry in the result.
        metric: Which score to color by. One of "overall", "quality",
            "popularity", "maintenance". Default "overall".

    Returns:
        Dict with: title, metric, one entry per input module (name, score,
        color -- score and color are null when npms.io had no data),
        colored count, failed_batches/total_batches, and a warning string
        when some npms.io requests failed.
    """
    try:
        colorizer = colorizer_for(metric)
        fetcher = _fetcher_from(ctx)

        nodes = [Module(name=name) for name in modules]
        outcome = await colorizer.colors_for_modules(nodes, fetcher)
        fetch = outcome.fetch

        entries: list[dict[str, object]] = []
        for node in nodes:
            record = fetch.table.get(node.name)
            entries.append(
                {
                    "name": node.name,
                    "score": colorizer.metric.select(record) if record is not None else None,
                    "color": outcome.colors.get(node),
                }
            )

        result: dict[str, object] = {
            "success": True,
            "title": colorizer.title,
            "metric": colorizer.metric.value,
            "modules": entries,
            "colored": len(outcome.colors),
            "failed_batches": fetch.failed_batches,
            "total_batches": fetch.total_batches,
        }

        warning = fetch.failure_message()
        if warning:
            await ctx.warning(warning)
            result["warning"] = warning

        return result

    except NpmsColorizerError as exc:
        return {"success": False, "error": str(exc)}
    except Exception as exc:
        await ctx.error(f"Unexpected error in colorize_modules: {exc}")
        return {"success": False, "error": f"Internal error: {type(exc).__name__}"}


async def score_legend(metric: str = "overall") -> dict[str, object]:
    """Return the legend for a score colorizer.

    Args:
        metric: One of "overall", "quality", "popularity", "maintenance".

    Returns:
        Dict with title, metric, and the colors used for a score of 0 (low)
        and 1 (high).
    """
    try:
        return {"success": True, **colorizer_for(metric).legend()}
    except NpmsColorizerError as exc:
        return {"success": False, "error": str(exc)}
