"""Trade records - the validated input of the daily aggregation engine."""

from .models import TradeRecord

__all__ = ["TradeRecord"]
