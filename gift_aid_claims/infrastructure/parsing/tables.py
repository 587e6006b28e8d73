"""Spreadsheet readers producing donation and other-income tables."""
from __future__ import annotations

from io import BytesIO
from pathlib import Path

import pandas as pd

from gift_aid_claims.infrastructure.parsing.utils import ensure_bytes

DEFAULT_DONATION_SHEET = "Donations"
DEFAULT_OTHER_INCOME_SHEET = "Other Income"

EXCEL_ENGINES = {".xlsx": "openpyxl", ".xlsm": "openpyxl", ".xls": "xlrd"}


def _read_workbook_sheet(raw: bytes, engine: str, sheet_name: str) -> pd.DataFrame:
    """Parse ``sheet_name`` (case-insensitive), or the first sheet when it is absent."""
    with pd.ExcelFile(BytesIO(raw), engine=engine) as workbook:
        by_name = {str(name).strip().casefold(): name for name in workbook.sheet_names}
        if not by_name:
            raise ValueError("Workbook has no sheets")
        chosen = by_name.get(sheet_name.strip().casefold(), workbook.sheet_names[0])
        return workbook.parse(chosen)


def read_table(
    source: BytesIO | Path | bytes | str,
    suffix: str | None = None,
    sheet_name: str = DEFAULT_DONATION_SHEET,
) -> pd.DataFrame:
    """Read a CSV or Excel sheet with column names stripped of whitespace.

    ``suffix`` is taken from the path when ``source`` is a file path.
    """
    if suffix is None and isinstance(source, (Path, str)):
        suffix = Path(source).suffix
    suffix = (suffix or ".csv").lower()
    raw = ensure_bytes(source)

    if suffix == ".csv":
        table = pd.read_csv(BytesIO(raw), dtype=str, keep_default_na=False)
    elif suffix in EXCEL_ENGINES:
        table = _read_workbook_sheet(raw, EXCEL_ENGINES[suffix], sheet_name)
    else:
        raise ValueError(f"Unsupported table format: {suffix}")

    table.columns = [str(column).strip() for column in table.columns]
    return table.dropna(how="all")


def read_donations(source: BytesIO | Path | bytes | str, suffix: str | None = None) -> pd.DataFrame:
    return read_table(source, suffix=suffix, sheet_name=DEFAULT_DONATION_SHEET)


def read_other_income(source: BytesIO | Path | bytes | str, suffix: str | None = None) -> pd.DataFrame:
    return read_table(source, suffix=suffix, sheet_name=DEFAULT_OTHER_INCOME_SHEET)
