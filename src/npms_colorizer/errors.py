"""Exception hierarchy for npms-colorizer.

All exceptions inherit from NpmsColorizerError (single catch point).
Messages are written for end users -- short, actionable, no stack traces.
"""

from __future__ import annotations


class NpmsColorizerError(Exception):
    """Base exception for all npms-colorizer errors."""


class ScoreFetchError(NpmsColorizerError):
    """A single batch request to the scoring API did not succeed."""


class InvalidMetricError(NpmsColorizerError):
    """Metric name is not one of overall, quality, popularity, maintenance."""


class ConfigError(NpmsColorizerError):
    """Fetcher settings are out of range."""
