"""Pydantic models for trade records."""

from datetime import datetime
from pydantic import BaseModel, Field


class TradeRecord(BaseModel):
    """A single executed trade, as produced by a record source."""

    timestamp: datetime
    ticker: str = Field(min_length=1)
    price: float = Field(gt=0, allow_inf_nan=False)
    volume: int = Field(ge=0)

    class Config:
        """Pydantic config."""

        frozen = True

    @property
    def traded_value(self) -> float:
        """Notional value of this trade (price x volume)."""
        return self.price * self.volume
