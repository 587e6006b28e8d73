"""Required-column checks for input tables."""
from __future__ import annotations

from typing import Sequence

import pandas as pd

from .errors import SchemaValidationError


def missing_columns(table: pd.DataFrame, required: Sequence[str]) -> list[str]:
    """Return the required names absent from ``table``, in ``required`` order.

    Presence only: extra columns are ignored and the table is not touched.
    """
    present = set(table.columns)
    return [name for name in required if name not in present]


def require_columns(table: pd.DataFrame, required: Sequence[str]) -> None:
    missing = missing_columns(table, required)
    if missing:
        raise SchemaValidationError(missing)
