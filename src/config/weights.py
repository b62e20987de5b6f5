from typing import Dict
from src.index.models import WeightTable


# === DEFAULT WEIGHT TABLE ===
# Weighted constituents of the market index
DEFAULT_WEIGHTS = WeightTable(
    name="default",
    weights={
        "ABC": 0.1,
        "MEGA": 0.3,
        "NGL": 0.4,
        "TRX": 0.2,
    },
)


# === ALTERNATIVE TABLES ===

# Two-ticker index, handy for checking gap days
PAIR_WEIGHTS = WeightTable(
    name="pair",
    weights={
        "ABC": 0.1,
        "RST": 0.3,
    },
)


WEIGHT_TABLES: Dict[str, WeightTable] = {
    table.name: table for table in (DEFAULT_WEIGHTS, PAIR_WEIGHTS)
}


# === ACTIVE TABLE ===
# Change this to swap the index definition
ACTIVE_WEIGHTS = DEFAULT_WEIGHTS
