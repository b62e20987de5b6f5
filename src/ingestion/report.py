from pydantic import BaseModel, Field
from typing import List


class SkippedRow(BaseModel):
    """A source row that did not yield a trade record."""

    row: str
    reason: str


class LoadReport(BaseModel):
    """Track loading progress and rejected rows."""

    source: str
    rows_read: int = 0
    loaded: int = 0
    skipped: List[SkippedRow] = Field(default_factory=list)

    @property
    def skipped_count(self) -> int:
        return len(self.skipped)

    def add_loaded(self) -> None:
        self.rows_read += 1
        self.loaded += 1

    def add_skipped(self, row: str, reason: str) -> None:
        self.rows_read += 1
        self.skipped.append(SkippedRow(row=row, reason=reason))
