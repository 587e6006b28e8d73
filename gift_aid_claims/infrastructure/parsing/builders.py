"""Concrete row builders mapping table rows onto R68 claim entries."""
from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Callable, Generic, TypeVar

import pandas as pd

from gift_aid_claims.config import SETTINGS
from gift_aid_claims.domain.errors import InvalidRowError, NotBuiltError
from gift_aid_claims.domain.models import ClaimLine, Donor, OtherIncomeLine
from gift_aid_claims.infrastructure.parsing.utils import (
    clean_text,
    parse_date,
    parse_flag,
    parse_money,
)

T = TypeVar("T")
V = TypeVar("V")


class _BaseBuilder(Generic[T]):
    """Holds the row between ``set_input`` and ``get_result``; never mutates it."""

    def __init__(self) -> None:
        self._row: pd.Series | None = None
        self._result: T | None = None

    def set_input(self, row: pd.Series) -> None:
        self._row = row
        self._result = None

    def build(self) -> None:
        if self._row is None:
            raise NotBuiltError("No input row set; call set_input first")
        self._result = self._map(self._row)

    def get_result(self) -> T:
        if self._result is None:
            raise NotBuiltError("build() must run before get_result()")
        result = self._result
        self._row = None
        self._result = None
        return result

    def _map(self, row: pd.Series) -> T:
        raise NotImplementedError

    @staticmethod
    def _cell(row: pd.Series, column: str, parser: Callable[[object], V]) -> V:
        value = row.get(column)
        try:
            return parser(value)
        except ValueError as exc:
            raise InvalidRowError(row.name, column, value, str(exc)) from exc

    @staticmethod
    def _text(row: pd.Series, column: str) -> str:
        return clean_text(row.get(column))

    def _required_text(self, row: pd.Series, column: str) -> str:
        text = self._text(row, column)
        if not text:
            raise InvalidRowError(row.name, column, row.get(column), "value is blank")
        return text


class AggregateDonationBuilder(_BaseBuilder[ClaimLine]):
    """Aggregated small donations: no donor identity, only a description."""

    def _map(self, row: pd.Series) -> ClaimLine:
        description = self._text(row, "Description") or SETTINGS.aggregate_description
        return ClaimLine(
            donation_date=self._cell(row, "Date", parse_date),
            total=self._cell(row, "Total", parse_money),
            donor=None,
            aggregated_donations=description[: SETTINGS.aggregate_description_max_length],
            sponsored=parse_flag(row.get("Sponsored")),
        )


class DonorDonationBuilder(_BaseBuilder[ClaimLine]):
    def _map(self, row: pd.Series) -> ClaimLine:
        postcode = self._text(row, "Postcode").upper()
        overseas = parse_flag(row.get("Overseas"))
        if not postcode and not overseas:
            raise InvalidRowError(row.name, "Postcode", row.get("Postcode"), "postcode required for UK donors")
        donor = Donor(
            forename=self._required_text(row, "Fore"),
            surname=self._required_text(row, "Sur"),
            house=self._required_text(row, "House"),
            postcode=postcode or None,
            title=self._text(row, "Title") or None,
            overseas=overseas and not postcode,
        )
        return ClaimLine(
            donation_date=self._cell(row, "Date", parse_date),
            total=self._cell(row, "Total", parse_money),
            donor=donor,
            aggregated_donations=None,
            sponsored=parse_flag(row.get("Sponsored")),
        )


class OtherIncomeBuilder(_BaseBuilder[OtherIncomeLine]):
    def _map(self, row: pd.Series) -> OtherIncomeLine:
        income_date: date = self._cell(row, "Date", parse_date)
        gross: Decimal = self._cell(row, "Gross", parse_money)
        tax: Decimal = self._cell(row, "Tax", parse_money)
        return OtherIncomeLine(
            payer=self._required_text(row, "Payer"),
            income_date=income_date,
            gross=gross,
            tax=tax,
        )
