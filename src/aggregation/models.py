"""Pydantic models for daily aggregation results."""

from datetime import date
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from src.index.models import IndexOutcome


class TickerDailyStats(BaseModel):
    """
    Summary of one ticker's trades on one day.

    Prices are None when the ticker did not trade that day ("no data"),
    which is distinct from a zero price.
    """

    ticker: str
    open: Optional[float] = None
    close: Optional[float] = None
    high: Optional[float] = None
    low: Optional[float] = None
    traded_value: float = Field(
        default=0.0, description="Sum of price x volume over the day's trades"
    )
    trade_count: int = 0

    @property
    def has_data(self) -> bool:
        return self.trade_count > 0


class DailyReport(BaseModel):
    """Everything computed for a single trading day."""

    trading_date: date

    # One entry per ticker seen anywhere in the input, ascending by ticker
    stats: List[TickerDailyStats]

    index: IndexOutcome

    # Closing price of every ticker that traded that day
    closing_prices: Dict[str, float] = Field(default_factory=dict)

    def stats_for(self, ticker: str) -> Optional[TickerDailyStats]:
        for entry in self.stats:
            if entry.ticker == ticker:
                return entry
        return None

    @property
    def tickers(self) -> List[str]:
        return [entry.ticker for entry in self.stats]
