"""Drives a single row builder over a single row."""
from __future__ import annotations

from typing import Generic, TypeVar

import pandas as pd

from .builders import RowBuilder
from .errors import NotBuiltError

T = TypeVar("T")


class RowCreator(Generic[T]):
    def __init__(self, builder: RowBuilder[T]) -> None:
        self._builder = builder
        self._row: pd.Series | None = None
        self._created = False
        self._result: T | None = None

    def set_input_row(self, row: pd.Series) -> None:
        self._row = row
        self._created = False
        self._result = None

    def create(self) -> None:
        if self._row is None:
            raise NotBuiltError("No input row set; call set_input_row first")
        self._builder.set_input(self._row)
        self._builder.build()
        self._result = self._builder.get_result()
        self._created = True

    def get_result(self) -> T:
        if not self._created:
            raise NotBuiltError("create() must run before get_result()")
        return self._result  # type: ignore[return-value]
