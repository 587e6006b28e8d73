from datetime import date
from decimal import Decimal

import pandas as pd
import pytest

from gift_aid_claims.domain.errors import InvalidRowError, NotBuiltError
from gift_aid_claims.infrastructure.parsing.builders import (
    AggregateDonationBuilder,
    DonorDonationBuilder,
    OtherIncomeBuilder,
)


def make_row(**overrides) -> pd.Series:
    values = {
        "Fore": "Jane",
        "Sur": "Doe",
        "House": "1",
        "Postcode": "ab1 2cd",
        "Date": "2023-04-01",
        "Total": "100",
    }
    values.update(overrides)
    return pd.Series(values, name=7)


def build(builder, row):
    builder.set_input(row)
    builder.build()
    return builder.get_result()


def test_donor_builder_populates_donor():
    line = build(DonorDonationBuilder(), make_row(Title="Mrs", Sponsored="yes"))

    assert line.donor.forename == "Jane"
    assert line.donor.surname == "Doe"
    assert line.donor.house == "1"
    assert line.donor.postcode == "AB1 2CD"
    assert line.donor.title == "Mrs"
    assert line.aggregated_donations is None
    assert line.sponsored is True
    assert line.total == Decimal("100.00")
    assert line.donation_date == date(2023, 4, 1)


def test_donor_builder_overseas_without_postcode():
    line = build(DonorDonationBuilder(), make_row(Postcode="", Overseas="Y"))

    assert line.donor.postcode is None
    assert line.donor.overseas is True


def test_donor_builder_requires_postcode_for_uk_donor():
    with pytest.raises(InvalidRowError) as excinfo:
        build(DonorDonationBuilder(), make_row(Postcode=""))

    assert excinfo.value.column == "Postcode"
    assert excinfo.value.row_label == 7


def test_aggregate_builder_leaves_donor_unset():
    line = build(AggregateDonationBuilder(), make_row(Total="£1,250.5"))

    assert line.donor is None
    assert line.aggregated_donations == "Aggregated donations"
    assert line.total == Decimal("1250.50")
    assert line.is_aggregated


def test_aggregate_builder_truncates_description():
    line = build(AggregateDonationBuilder(), make_row(Description="Church collection plate " * 3))

    assert len(line.aggregated_donations) == 35


def test_invalid_total_names_row_and_column():
    with pytest.raises(InvalidRowError) as excinfo:
        build(DonorDonationBuilder(), make_row(Total="lots"))

    assert excinfo.value.column == "Total"
    assert excinfo.value.value == "lots"


def test_uk_date_format_accepted():
    line = build(DonorDonationBuilder(), make_row(Date="05/04/2023"))

    assert line.donation_date == date(2023, 4, 5)


@pytest.mark.parametrize("value", ["today", "now", "2023-04-01 not a date at all", "31/02/2023", "April 1st"])
def test_unrecognised_date_is_rejected(value):
    with pytest.raises(InvalidRowError) as excinfo:
        build(DonorDonationBuilder(), make_row(Date=value))

    assert excinfo.value.column == "Date"
    assert excinfo.value.value == value


def test_builder_does_not_mutate_row_and_resets():
    row = make_row()
    before = row.copy()
    builder = DonorDonationBuilder()

    build(builder, row)

    pd.testing.assert_series_equal(row, before)
    with pytest.raises(NotBuiltError):
        builder.get_result()


def test_builder_reusable_across_rows():
    builder = AggregateDonationBuilder()

    first = build(builder, make_row(Total="1"))
    second = build(builder, make_row(Total="2"))

    assert (first.total, second.total) == (Decimal("1.00"), Decimal("2.00"))


def test_other_income_builder():
    row = pd.Series({"Payer": "Bank plc", "Date": date(2023, 3, 31), "Gross": "200", "Tax": "40"}, name=0)

    line = build(OtherIncomeBuilder(), row)

    assert line.payer == "Bank plc"
    assert line.income_date == date(2023, 3, 31)
    assert line.gross == Decimal("200.00")
    assert line.tax == Decimal("40.00")
