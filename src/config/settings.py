import os

# Trade file read by scripts/run_daily_report.py when no path is given
MARKET_DATA_PATH = os.getenv(
    "MARKET_DATA_PATH",
    "data/market_data.ssv"
)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
