from typing import Sequence
from src.trades.models import TradeRecord
from .models import TickerDailyStats


def compute_ticker_stats(
    ticker: str, trades: Sequence[TradeRecord]
) -> TickerDailyStats:
    """
    Compute open/close/high/low and traded value in a single pass.

    Trades may arrive in any order. Open is the price of the earliest
    trade, close the price of the latest; when several trades share that
    timestamp the first one in input order is used.
    """
    if not trades:
        return TickerDailyStats(ticker=ticker)

    first_trade = trades[0]
    last_trade = first_trade
    high = first_trade.price
    low = first_trade.price
    traded_value = 0.0

    for trade in trades:
        # Strict comparisons keep the first trade among equal timestamps
        if trade.timestamp < first_trade.timestamp:
            first_trade = trade
        if trade.timestamp > last_trade.timestamp:
            last_trade = trade

        if trade.price > high:
            high = trade.price
        if trade.price < low:
            low = trade.price

        traded_value += trade.traded_value

    return TickerDailyStats(
        ticker=ticker,
        open=first_trade.price,
        close=last_trade.price,
        high=high,
        low=low,
        traded_value=traded_value,
        trade_count=len(trades),
    )
