import importlib.util
import io
import json
import pytest
from pathlib import Path
from src.aggregation.aggregator import DailyAggregator
from src.config.weights import DEFAULT_WEIGHTS
from src.index.models import IndexStatus
from src.ingestion.source import SsvRecordSource
from src.reporting.sinks import ConsoleReportSink

ROOT = Path(__file__).resolve().parents[2]

TRADES = """timestamp;ticker;price;volume
2025-02-14 09:30:00;MEGA;150.0;1000
2025-02-15 10:30:00;ABC;155.0;2000
2025-02-15 11:30:00;MEGA;2500.0;1500
2025-02-17 09:30:00;ABC;160.0;1200
2025-02-15 11:30:00;NGL;2500.0;1500
2025-02-15 09:32:00;TRX;170.0;1200
2025-02-15 09:40:00;TRX;-1;1200
"""


@pytest.fixture
def trade_file(tmp_path):
    path = tmp_path / "market_data.ssv"
    path.write_text(TRADES)
    return path


def load_runner():
    """Import scripts/run_daily_report.py as a module."""
    spec = importlib.util.spec_from_file_location(
        "run_daily_report", ROOT / "scripts" / "run_daily_report.py"
    )
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_file_to_report_e2e(trade_file):
    """
    1. Load trades from file (one invalid row skipped)
    2. Aggregate with the default weight table
    3. Render to text
    """
    source = SsvRecordSource(trade_file)
    records = source.read_records()
    assert len(records) == 6
    assert source.last_report.skipped_count == 1

    aggregator = DailyAggregator(DEFAULT_WEIGHTS)
    reports = aggregator.process_all(records)

    statuses = [r.index.status for r in reports]
    assert statuses == [
        IndexStatus.UNAVAILABLE,  # Feb 14: only MEGA
        IndexStatus.COMPUTED,     # Feb 15: all weighted tickers
        IndexStatus.FALLBACK,     # Feb 17: only ABC
    ]
    assert reports[2].index.value == pytest.approx(1799.5)

    stream = io.StringIO()
    ConsoleReportSink(stream).emit_all(reports)
    text = stream.getvalue()

    assert text.startswith("Date 2025-02-14\nTicker: ABC\nOpen price: N/A\n")
    assert "Daily Index: 1799.50" in text
    assert "Using last known index: 1799.50" in text
    assert "Cannot calculate the index." in text


def test_runner_main(trade_file, capsys):
    runner = load_runner()
    exit_code = runner.main([str(trade_file), "--log-level", "WARNING"])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert out.count("Date 2025-02-") == 3
    assert "Daily Index: 1799.50" in out


def test_runner_with_weights_file(trade_file, tmp_path, capsys):
    weights = tmp_path / "weights.json"
    weights.write_text(json.dumps({"ABC": 1.0}))
    runner = load_runner()

    assert runner.main([str(trade_file), "--weights-file", str(weights)]) == 0

    out = capsys.readouterr().out
    # ABC alone: index equals ABC's close
    assert "Daily Index: 155.00" in out
    assert "Daily Index: 160.00" in out


def test_runner_missing_file(tmp_path, capsys):
    runner = load_runner()
    assert runner.main([str(tmp_path / "missing.ssv")]) == 1
    assert "File not found" in capsys.readouterr().err


def test_runner_sample_data(capsys):
    runner = load_runner()
    assert runner.main([str(ROOT / "data" / "market_data.ssv")]) == 0
    assert "Daily Index: 1799.50" in capsys.readouterr().out


def test_runner_with_named_weights_table(trade_file, capsys):
    runner = load_runner()

    assert runner.main([str(trade_file), "--weights-table", "pair"]) == 0

    # RST never trades, so no day can compute the pair index
    out = capsys.readouterr().out
    assert out.count("Cannot calculate the index.") == 3
