"""Assemblers turning validated tables into the R68 repayment payload."""
from __future__ import annotations

import logging
from datetime import date
from typing import Sequence

import pandas as pd

from gift_aid_claims.application.dto import ClaimInputContext
from gift_aid_claims.config import SETTINGS
from gift_aid_claims.domain.builders import RowBuilder
from gift_aid_claims.domain.creators import RowCreator
from gift_aid_claims.domain.errors import InvalidRowError
from gift_aid_claims.domain.models import Claim, ClaimLine, DonationKind, OtherIncomeLine
from gift_aid_claims.infrastructure.parsing.builders import (
    AggregateDonationBuilder,
    DonorDonationBuilder,
    OtherIncomeBuilder,
)
from gift_aid_claims.infrastructure.parsing.utils import parse_date

logger = logging.getLogger(__name__)


def builder_for(kind: DonationKind | None) -> RowBuilder[ClaimLine]:
    """Pick the donation builder for a row kind; ``None`` means the donor default."""
    if kind is DonationKind.AGGREGATED:
        return AggregateDonationBuilder()
    if kind is DonationKind.DONOR or kind is None:
        return DonorDonationBuilder()
    raise AssertionError(f"unhandled donation kind {kind!r}")


def earliest_date(dates: pd.Series) -> date | None:
    """Minimum of a whole date column, ``None`` for an empty column."""
    parsed: list[date] = []
    for label, value in dates.items():
        try:
            parsed.append(parse_date(value))
        except ValueError as exc:
            raise InvalidRowError(label, str(dates.name), value, str(exc)) from exc
    return min(parsed) if parsed else None


class ClaimAssembler:
    """Builds the Gift Aid donation lines of a claim, one builder per row."""

    def assemble_lines(self, context: ClaimInputContext) -> Sequence[ClaimLine]:
        table = context.donations
        kind_column = SETTINGS.donation_kind_column if context.has_donation_kind else None

        lines: list[ClaimLine] = []
        for label, row in table.iterrows():
            kind = DonationKind.from_value(row[kind_column], row_label=label) if kind_column else None
            creator = RowCreator(builder_for(kind))
            creator.set_input_row(row)
            creator.create()
            lines.append(creator.get_result())
        return tuple(lines)

    def assemble(self, context: ClaimInputContext) -> Claim:
        lines = self.assemble_lines(context)
        earliest = earliest_date(context.donations["Date"])
        other_income = OtherIncomeAssembler().assemble(context)
        aggregated = sum(1 for line in lines if line.is_aggregated)
        logger.info(
            "Assembled claim: %d donation lines (%d aggregated), %d other income lines, earliest %s",
            len(lines),
            aggregated,
            len(other_income),
            earliest,
        )
        return Claim(lines=lines, earliest_donation_date=earliest, other_income=other_income)


class OtherIncomeAssembler:
    def assemble(self, context: ClaimInputContext) -> Sequence[OtherIncomeLine]:
        lines: list[OtherIncomeLine] = []
        for _, row in context.other_income.iterrows():
            creator = RowCreator(OtherIncomeBuilder())
            creator.set_input_row(row)
            creator.create()
            lines.append(creator.get_result())
        return tuple(lines)
