"""IndexCalculator - computes the daily weighted market index."""

import logging
from typing import Iterable, Mapping

from src.trades.models import TradeRecord
from .models import IndexOutcome, RunningIndexState, WeightTable

logger = logging.getLogger(__name__)


class IndexCalculator:
    """
    Compute the weighted market index for one trading day.

    The index is the weighted sum of closing prices of the tickers in the
    weight table. It is only computed when every weighted ticker traded
    that day; extra tickers outside the table are ignored. Otherwise the
    last known index is reused (fallback), or no index is reported if
    none has been computed yet.
    """

    def __init__(self, weight_table: WeightTable):
        self.weight_table = weight_table

    def compute_daily_index(
        self,
        day_records: Iterable[TradeRecord],
        closing_prices: Mapping[str, float],
        state: RunningIndexState,
    ) -> IndexOutcome:
        """
        Compute the index for a day and update the running state.

        Args:
            day_records: All trades of the day
            closing_prices: Closing price per ticker that traded that day
            state: Running state; last_known_index is updated on success

        Returns:
            IndexOutcome (COMPUTED, FALLBACK or UNAVAILABLE)
        """
        traded_tickers = {record.ticker for record in day_records}
        missing = sorted(self.weight_table.tickers - traded_tickers)

        if not missing:
            value = self._weighted_sum(closing_prices)
            state.last_known_index = value
            logger.debug(f"Computed index {value:.2f}")
            return IndexOutcome.computed(value)

        outcome = IndexOutcome.fallback(state.last_known_index, missing)
        if outcome.is_available:
            logger.info(
                f"Weighted tickers missing {missing}, "
                f"using last known index {outcome.value:.2f}"
            )
        else:
            logger.info(f"Weighted tickers missing {missing}, no index available yet")
        return outcome

    def _weighted_sum(self, closing_prices: Mapping[str, float]) -> float:
        index_value = 0.0
        for ticker in self.weight_table.weights:
            if ticker in closing_prices:
                index_value += self.weight_table.weight(ticker) * closing_prices[ticker]
        return index_value
