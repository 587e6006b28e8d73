"""Row builder capability anchoring the claim assembly."""
from __future__ import annotations

from typing import Protocol, TypeVar

import pandas as pd

ResultT = TypeVar("ResultT", covariant=True)


class RowBuilder(Protocol[ResultT]):
    """Populates one typed claim entry from one table row."""

    def set_input(self, row: pd.Series) -> None:
        ...

    def build(self) -> None:
        ...

    def get_result(self) -> ResultT:
        ...
