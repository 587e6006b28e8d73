"""Domain models for Gift Aid repayment claims.

These dataclasses capture the R68 claim shapes produced from donation and
other-income tables.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Sequence

import pandas as pd

from .errors import UnknownDonationKindError


class DonationKind(Enum):
    """Value of the optional ``Type`` column selecting how a row is mapped."""

    AGGREGATED = "Agg"
    DONOR = "GAD"

    @classmethod
    def from_value(cls, value: object, row_label: object = None) -> "DonationKind | None":
        """Parse a cell value; blank cells return ``None`` (use the default)."""
        if value is None or pd.isna(value):
            return None
        text = str(value).strip()
        if not text:
            return None
        try:
            return cls(text)
        except ValueError:
            raise UnknownDonationKindError(row_label, value) from None


@dataclass(frozen=True)
class Donor:
    forename: str
    surname: str
    house: str
    postcode: str | None
    title: str | None = None
    overseas: bool = False


@dataclass(frozen=True)
class ClaimLine:
    """One GAD entry of the claim. Exactly one of donor / aggregated_donations is set."""

    donation_date: date
    total: Decimal
    donor: Donor | None = None
    aggregated_donations: str | None = None
    sponsored: bool = False

    @property
    def is_aggregated(self) -> bool:
        return self.aggregated_donations is not None


@dataclass(frozen=True)
class OtherIncomeLine:
    payer: str
    income_date: date
    gross: Decimal
    tax: Decimal


@dataclass(frozen=True)
class Claim:
    lines: Sequence[ClaimLine] = field(default_factory=tuple)
    earliest_donation_date: date | None = None
    other_income: Sequence[OtherIncomeLine] = field(default_factory=tuple)

    @property
    def total_donations(self) -> Decimal:
        return sum((line.total for line in self.lines), Decimal("0"))

    def has_donations(self) -> bool:
        return bool(self.lines)
