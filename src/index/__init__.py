"""Index module - computes the daily weighted market index."""

from .models import IndexOutcome, IndexStatus, RunningIndexState, WeightTable
from .calculator import IndexCalculator

__all__ = [
    "IndexOutcome",
    "IndexStatus",
    "RunningIndexState",
    "WeightTable",
    "IndexCalculator",
]
