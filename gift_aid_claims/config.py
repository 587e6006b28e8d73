"""Central configuration for the Gift Aid claims package."""
from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent.parent
DATA_DIR = BASE_DIR / "data"
FAILED_MESSAGES_DIR = Path(os.environ.get("GIFT_AID_FAILED_DIR", DATA_DIR / "failed_messages"))

ENVELOPE_NAMESPACE = "http://www.govtalk.gov.uk/CM/envelope"
SUCCESS_RESPONSE_NAMESPACE = "http://www.inlandrevenue.gov.uk/SuccessResponse"
R68_NAMESPACE = "http://www.govtalk.gov.uk/taxation/charities/r68/2"

DONATION_REQUIRED_COLUMNS = ("Fore", "Sur", "House", "Postcode", "Date", "Total")
OTHER_INCOME_REQUIRED_COLUMNS = ("Payer", "Date", "Gross", "Tax")
DONATION_KIND_COLUMN = "Type"

PLACEHOLDER_NOTICE = (
    "No valid SuccessResponse contained in the Body element of this message. Contact Support."
)


@dataclass(slots=True, frozen=True)
class Settings:
    envelope_namespace: str
    success_response_namespace: str
    r68_namespace: str
    donation_required_columns: tuple[str, ...]
    other_income_required_columns: tuple[str, ...]
    donation_kind_column: str
    placeholder_notice: str
    aggregate_description: str
    aggregate_description_max_length: int
    money_quantum: Decimal
    failed_messages_dir: Path


SETTINGS = Settings(
    envelope_namespace=ENVELOPE_NAMESPACE,
    success_response_namespace=SUCCESS_RESPONSE_NAMESPACE,
    r68_namespace=R68_NAMESPACE,
    donation_required_columns=DONATION_REQUIRED_COLUMNS,
    other_income_required_columns=OTHER_INCOME_REQUIRED_COLUMNS,
    donation_kind_column=DONATION_KIND_COLUMN,
    placeholder_notice=PLACEHOLDER_NOTICE,
    aggregate_description="Aggregated donations",
    aggregate_description_max_length=35,
    money_quantum=Decimal("0.01"),
    failed_messages_dir=FAILED_MESSAGES_DIR,
)
