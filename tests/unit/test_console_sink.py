import io
from datetime import date
from src.aggregation.models import DailyReport, TickerDailyStats
from src.index.models import IndexOutcome
from src.reporting.sinks import CollectingReportSink, ConsoleReportSink, format_index


def make_report(outcome):
    return DailyReport(
        trading_date=date(2025, 2, 15),
        stats=[
            TickerDailyStats(
                ticker="ABC",
                open=155.0,
                close=156.0,
                high=157.3,
                low=154.0,
                traded_value=310000.0,
                trade_count=2,
            ),
            TickerDailyStats(ticker="MEGA"),
        ],
        index=outcome,
        closing_prices={"ABC": 156.0},
    )


def test_console_sink_layout():
    stream = io.StringIO()
    ConsoleReportSink(stream).emit(make_report(IndexOutcome.computed(1799.5)))

    assert stream.getvalue().splitlines() == [
        "Date 2025-02-15",
        "Ticker: ABC",
        "Open price: 155.0",
        "Close price: 156.0",
        "Highest price: 157.3",
        "Lowest price: 154.0",
        "Traded volume: 310000.0",
        "Ticker: MEGA",
        "Open price: N/A",
        "Close price: N/A",
        "Highest price: N/A",
        "Lowest price: N/A",
        "Traded volume: 0.0",
        "Daily Index: 1799.50",
        "",
    ]


def test_format_index_fallback_messages():
    assert format_index(IndexOutcome.fallback(76.0, ["RST"])) == (
        "Some weighted tickers are missing. Using last known index: 76.00"
    )
    assert format_index(IndexOutcome.fallback(None, ["RST"])) == (
        "Some weighted tickers are missing. Cannot calculate the index."
    )


def test_console_sink_defaults_to_stdout(capsys):
    ConsoleReportSink().emit_all([make_report(IndexOutcome.computed(1.0))])
    assert "Daily Index: 1.00" in capsys.readouterr().out


def test_collecting_sink():
    sink = CollectingReportSink()
    reports = [make_report(IndexOutcome.computed(1.0)), make_report(IndexOutcome.computed(2.0))]
    sink.emit_all(reports)
    assert sink.reports == reports
