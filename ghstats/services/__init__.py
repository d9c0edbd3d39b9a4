"""Application services."""

from ghstats.services.stats import StatsService

__all__ = ["StatsService"]
