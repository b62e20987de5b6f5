"""Aggregation module - per-day, per-ticker statistics and daily reports."""

from .models import DailyReport, TickerDailyStats
from .stats import compute_ticker_stats
from .aggregator import DailyAggregator

__all__ = [
    "DailyReport",
    "TickerDailyStats",
    "compute_ticker_stats",
    "DailyAggregator",
]
