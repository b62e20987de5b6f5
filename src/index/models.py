"""Pydantic models for the Index module."""

from enum import Enum
from typing import Dict, FrozenSet, List, Optional
from pydantic import BaseModel, Field


class IndexStatus(str, Enum):
    """How a day's index value was obtained."""

    COMPUTED = "computed"
    FALLBACK = "fallback"
    UNAVAILABLE = "unavailable"


class WeightTable(BaseModel):
    """
    Static ticker -> weight configuration for the market index.

    Weights are used as given: they are not normalized and do not
    have to sum to 1.0.
    """

    name: str = "custom"
    weights: Dict[str, float]

    class Config:
        """Pydantic config."""

        frozen = True

    @property
    def tickers(self) -> FrozenSet[str]:
        return frozenset(self.weights)

    def weight(self, ticker: str) -> float:
        """Weight of a ticker, 0.0 for tickers outside the table."""
        return self.weights.get(ticker, 0.0)


class RunningIndexState(BaseModel):
    """Index state carried from one day to the next."""

    last_known_index: Optional[float] = None


class IndexOutcome(BaseModel):
    """Result of the daily index computation."""

    status: IndexStatus
    value: Optional[float] = None

    # Weighted tickers that did not trade that day
    missing_tickers: List[str] = Field(default_factory=list)

    @classmethod
    def computed(cls, value: float) -> "IndexOutcome":
        return cls(status=IndexStatus.COMPUTED, value=value)

    @classmethod
    def fallback(
        cls, last_known_index: Optional[float], missing_tickers: List[str]
    ) -> "IndexOutcome":
        """
        Reuse the previous index value.

        Without a previous value the outcome is UNAVAILABLE.
        """
        if last_known_index is None:
            return cls(
                status=IndexStatus.UNAVAILABLE,
                missing_tickers=missing_tickers,
            )
        return cls(
            status=IndexStatus.FALLBACK,
            value=last_known_index,
            missing_tickers=missing_tickers,
        )

    @property
    def is_available(self) -> bool:
        return self.value is not None
