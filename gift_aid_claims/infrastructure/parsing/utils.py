"""Shared parsing utilities for spreadsheet cells and gateway timestamps."""
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from io import BytesIO
from pathlib import Path

import pandas as pd

from gift_aid_claims.config import SETTINGS


def ensure_bytes(source: BytesIO | Path | bytes | str) -> bytes:
    if isinstance(source, bytes):
        return source
    if isinstance(source, BytesIO):
        return source.getvalue()
    if isinstance(source, (Path, str)):
        return Path(source).read_bytes()
    raise TypeError(f"Unsupported source type: {type(source)!r}")


def is_blank(value: object) -> bool:
    if value is None:
        return True
    try:
        if pd.isna(value):
            return True
    except (TypeError, ValueError):
        pass
    s = str(value).strip()
    return not s or s.upper() == "NAN"


def clean_text(value: object) -> str:
    return "" if is_blank(value) else str(value).strip()


def parse_money(value: object) -> Decimal:
    """Parse a currency cell into pence-precision ``Decimal``.

    Raises ``ValueError`` for blank or unparseable cells.
    """
    if is_blank(value):
        raise ValueError("amount is blank")
    s = str(value).strip()
    negative = False
    if s.startswith("(") and s.endswith(")"):
        negative = True
        s = s[1:-1]
    for ch in [",", "$", "€", "£", " "]:
        s = s.replace(ch, "")
    try:
        result = Decimal(s)
    except InvalidOperation:
        raise ValueError("amount is not a number") from None
    if not result.is_finite():
        raise ValueError("amount is not a number")
    if negative:
        result = -result
    return result.quantize(SETTINGS.money_quantum)


UK_DATE_FORMATS = ("%d/%m/%Y", "%d-%m-%Y", "%d.%m.%Y", "%d/%m/%y")


def parse_date(value: object) -> date:
    """Parse a date cell.

    Whole ISO strings first, then the UK day-first forms in ``UK_DATE_FORMATS``.
    Anything else raises ``ValueError``.
    """
    if is_blank(value):
        raise ValueError("date is blank")
    if isinstance(value, pd.Timestamp):
        return value.date()
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    s = str(value).strip()
    try:
        return date.fromisoformat(s)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(s).date()
    except ValueError:
        pass
    for fmt in UK_DATE_FORMATS:
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    raise ValueError("date is not recognised")


def parse_flag(value: object) -> bool:
    return clean_text(value).lower() in {"y", "yes", "true", "1", "x"}


def parse_timestamp(value: str | None) -> datetime | None:
    """Parse an xsd:dateTime as sent by the gateway (``2013-03-14T15:20:09.453``).

    Malformed values raise ``ValueError``.
    """
    if value is None or not value.strip():
        return None
    s = value.strip()
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    return datetime.fromisoformat(s)
