import sys
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, TextIO

from src.aggregation.models import DailyReport, TickerDailyStats
from src.index.models import IndexOutcome, IndexStatus


class ReportSink(ABC):
    """Abstract base for consumers of daily reports."""

    @abstractmethod
    def emit(self, report: DailyReport) -> None:
        """Handle one daily report."""
        pass

    def emit_all(self, reports: Iterable[DailyReport]) -> None:
        for report in reports:
            self.emit(report)


class CollectingReportSink(ReportSink):
    """Keep emitted reports in memory."""

    def __init__(self):
        self.reports: List[DailyReport] = []

    def emit(self, report: DailyReport) -> None:
        self.reports.append(report)


class ConsoleReportSink(ReportSink):
    """
    Print reports as plain text, one block per day:

        Date 2025-02-15
        Ticker: ABC
        Open price: 155.0
        ...
        Traded volume: 310000.0
        Daily Index: 1799.50
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream or sys.stdout

    def emit(self, report: DailyReport) -> None:
        self._write(f"Date {report.trading_date.isoformat()}")
        for stats in report.stats:
            self._write_stats(stats)
        self._write(format_index(report.index))
        self._write("")

    def _write_stats(self, stats: TickerDailyStats) -> None:
        self._write(f"Ticker: {stats.ticker}")
        self._write(format_price("Open price", stats.open))
        self._write(format_price("Close price", stats.close))
        self._write(format_price("Highest price", stats.high))
        self._write(format_price("Lowest price", stats.low))
        self._write(f"Traded volume: {stats.traded_value:.1f}")

    def _write(self, line: str) -> None:
        self.stream.write(line + "\n")


def format_price(label: str, value: Optional[float]) -> str:
    if value is None:
        return f"{label}: N/A"
    return f"{label}: {value:.1f}"


def format_index(outcome: IndexOutcome) -> str:
    if outcome.status == IndexStatus.COMPUTED:
        return f"Daily Index: {outcome.value:.2f}"
    if outcome.status == IndexStatus.FALLBACK:
        return (
            "Some weighted tickers are missing. "
            f"Using last known index: {outcome.value:.2f}"
        )
    return "Some weighted tickers are missing. Cannot calculate the index."
