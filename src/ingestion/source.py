import logging
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional, Union

import pandas as pd

from src.trades.models import TradeRecord
from .config import SourceConfig
from .report import LoadReport

logger = logging.getLogger(__name__)

# timestamp;ticker;price;volume
N_FIELDS = 4

# Columns read per row. Rows are padded to this width so that the shape of
# the first row never decides how the remaining rows are split.
MAX_FIELDS = 16


class RecordSource(ABC):
    """Abstract base for all trade record sources."""

    @abstractmethod
    def read_records(self) -> List[TradeRecord]:
        """Return validated trade records, in source order."""
        pass


class InMemoryRecordSource(RecordSource):
    """Serve records that are already in memory (tests, notebooks)."""

    def __init__(self, records: Iterable[TradeRecord]):
        self.records = list(records)

    def read_records(self) -> List[TradeRecord]:
        return list(self.records)


class SsvRecordSource(RecordSource):
    """
    Read trades from a semicolon separated file.

    Columns are positional: timestamp, ticker, price, volume. Rows that
    cannot be parsed or fail validation are skipped and reported in
    last_report; they never reach the aggregation engine.
    """

    def __init__(self, path: Union[str, Path], config: Optional[SourceConfig] = None):
        self.path = Path(path)
        self.config = config or SourceConfig()
        self.last_report: Optional[LoadReport] = None

    def read_records(self) -> List[TradeRecord]:
        """
        Parse the file into trade records.

        Raises:
            FileNotFoundError: If the file does not exist
        """
        report = LoadReport(source=str(self.path))
        self.last_report = report

        try:
            df = pd.read_csv(
                self.path,
                sep=self.config.delimiter,
                header=None,
                names=list(range(MAX_FIELDS)),
                index_col=False,
                skiprows=1 if self.config.has_header else 0,
                dtype=str,
                keep_default_na=False,
                engine="python",
            )
        except pd.errors.EmptyDataError:
            logger.warning(f"{self.path} is empty, no records loaded")
            return []

        records = []
        for row in df.itertuples(index=False, name=None):
            fields = ["" if pd.isna(v) else str(v) for v in row]
            raw = self.config.delimiter.join(fields).rstrip(self.config.delimiter)
            try:
                record = self._parse_fields(fields)
            except ValueError as e:
                logger.warning(f"Skipping invalid record: {raw}")
                report.add_skipped(raw, str(e))
                continue
            records.append(record)
            report.add_loaded()

        logger.info(
            f"Loaded {report.loaded} records from {self.path} "
            f"({report.skipped_count} skipped)"
        )
        return records

    def _parse_fields(self, fields: List[str]) -> TradeRecord:
        """
        Convert one row into a TradeRecord.

        Raises:
            ValueError: On missing fields, unparseable values or values
                rejected by TradeRecord validation
        """
        if any(f.strip() for f in fields[N_FIELDS:]):
            raise ValueError(f"Too many fields, expected {N_FIELDS}")
        if len(fields) < N_FIELDS or any(not f.strip() for f in fields[:N_FIELDS]):
            raise ValueError(f"Expected {N_FIELDS} non-empty fields")

        timestamp = datetime.strptime(fields[0].strip(), self.config.timestamp_format)
        return TradeRecord(
            timestamp=timestamp,
            ticker=fields[1].strip(),
            price=float(fields[2]),
            volume=int(fields[3]),
        )

