"""Loading of static weight tables."""

import json
from pathlib import Path
from typing import Mapping, Union

from .models import WeightTable


def weight_table_from_mapping(
    weights: Mapping[str, float], name: str = "custom"
) -> WeightTable:
    """
    Build a WeightTable from a ticker -> weight mapping.

    Weights are kept as given (no normalization).
    """
    return WeightTable(name=name, weights=dict(weights))


def load_weight_table(path: Union[str, Path]) -> WeightTable:
    """
    Load a weight table from a JSON file.

    The file must hold a single object mapping ticker to weight, e.g.
    {"ABC": 0.1, "MEGA": 0.3}. The table is named after the file stem.

    Raises:
        ValueError: If the file is not a JSON object of numeric weights
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid weights file '{path}': {e}") from e

    if not isinstance(data, dict):
        raise ValueError(
            f"Weights file '{path}' must contain an object of ticker -> weight"
        )

    return weight_table_from_mapping(data, name=path.stem)
