"""Application-level DTOs for claim assembly."""
from __future__ import annotations

from dataclasses import dataclass, field

import pandas as pd

from gift_aid_claims.config import SETTINGS
from gift_aid_claims.domain.validation import require_columns


def _empty_other_income() -> pd.DataFrame:
    return pd.DataFrame(columns=list(SETTINGS.other_income_required_columns))


@dataclass(slots=True, frozen=True, eq=False)
class ClaimInputContext:
    """Tables for one claim assembly, validated on construction.

    Each assembly gets its own context, so concurrent callers never share
    the active donation or income table.
    """

    donations: pd.DataFrame
    other_income: pd.DataFrame = field(default_factory=_empty_other_income)

    def __post_init__(self) -> None:
        require_columns(self.donations, SETTINGS.donation_required_columns)
        require_columns(self.other_income, SETTINGS.other_income_required_columns)

    @property
    def has_donation_kind(self) -> bool:
        return SETTINGS.donation_kind_column in self.donations.columns
