"""DailyAggregator - turns a stream of trades into per-day reports."""

import logging
from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, List, Optional, Set

from src.config.weights import ACTIVE_WEIGHTS
from src.index.calculator import IndexCalculator
from src.index.models import RunningIndexState, WeightTable
from src.trades.models import TradeRecord
from .models import DailyReport
from .stats import compute_ticker_stats

logger = logging.getLogger(__name__)


class DailyAggregator:
    """
    Compute daily ticker statistics and the weighted market index.

    This aggregator:
    1. Groups trades by calendar date, processed in ascending order
    2. Groups each day's trades by ticker (every ticker seen in the input
       is reported, with no data on days it did not trade)
    3. Records each ticker's closing price for the day
    4. Computes the daily index, falling back to the last known value

    The last known index is kept for the lifetime of the aggregator,
    including across repeated process_all calls.
    """

    def __init__(
        self,
        weight_table: WeightTable = ACTIVE_WEIGHTS,
        calculator: Optional[IndexCalculator] = None,
    ):
        self.calculator = calculator or IndexCalculator(weight_table)
        self.state = RunningIndexState()
        self._closing_prices: Dict[str, float] = {}

    def process_all(self, records: Iterable[TradeRecord]) -> List[DailyReport]:
        """
        Process trades and build one report per distinct date.

        Args:
            records: Validated trades, in any order

        Returns:
            List of DailyReport in ascending date order
        """
        records = list(records)
        all_tickers = self._unique_tickers(records)
        by_date = self._group_by_date(records)

        logger.info(
            f"Processing {len(records)} records over {len(by_date)} days "
            f"({len(all_tickers)} tickers)"
        )

        reports = []
        for trading_date in sorted(by_date):
            report = self._process_day(trading_date, by_date[trading_date], all_tickers)
            reports.append(report)

        return reports

    def get_last_known_index(self) -> Optional[float]:
        return self.state.last_known_index

    def get_daily_closing_prices(self) -> Dict[str, float]:
        """Closing prices of the most recently processed day."""
        return dict(self._closing_prices)

    def _process_day(
        self,
        trading_date: date,
        records: List[TradeRecord],
        all_tickers: Set[str],
    ) -> DailyReport:
        self._closing_prices.clear()
        logger.debug(f"Processing {trading_date}: {len(records)} records")

        stats = []
        grouped = self._group_by_ticker(records, all_tickers)
        for ticker in sorted(grouped):
            ticker_stats = compute_ticker_stats(ticker, grouped[ticker])
            if ticker_stats.has_data:
                self._closing_prices[ticker] = ticker_stats.close
            stats.append(ticker_stats)

        outcome = self.calculator.compute_daily_index(
            records, self._closing_prices, self.state
        )

        return DailyReport(
            trading_date=trading_date,
            stats=stats,
            index=outcome,
            closing_prices=dict(self._closing_prices),
        )

    @staticmethod
    def _group_by_date(records: List[TradeRecord]) -> Dict[date, List[TradeRecord]]:
        by_date: Dict[date, List[TradeRecord]] = defaultdict(list)
        for record in records:
            by_date[record.timestamp.date()].append(record)
        return by_date

    @staticmethod
    def _group_by_ticker(
        records: List[TradeRecord], all_tickers: Set[str]
    ) -> Dict[str, List[TradeRecord]]:
        """Group by ticker; tickers without trades get an empty list."""
        grouped: Dict[str, List[TradeRecord]] = {ticker: [] for ticker in all_tickers}
        for record in records:
            grouped[record.ticker].append(record)
        return grouped

    @staticmethod
    def _unique_tickers(records: List[TradeRecord]) -> Set[str]:
        return {record.ticker for record in records}
