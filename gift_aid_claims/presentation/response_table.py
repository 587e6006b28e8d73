"""Tabular views of a read gateway response."""
from __future__ import annotations

import csv
import io

import pandas as pd

from gift_aid_claims.domain.envelope import EnvelopeMetadata, ResponseBody

RESPONSE_COLUMNS = [
    "correlation_id",
    "qualifier",
    "response_end_point",
    "gateway_timestamp",
    "irmark_receipt",
    "accepted_time",
    "message",
]


def _iso(value) -> str:
    return value.isoformat() if value is not None else ""


def response_to_rows(metadata: EnvelopeMetadata, body: ResponseBody) -> list[dict[str, str]]:
    """One row per informational message; a body without messages still yields a row."""
    messages = tuple(body.messages) or ("",)
    rows: list[dict[str, str]] = []
    for message in messages:
        rows.append(
            {
                "correlation_id": metadata.correlation_id,
                "qualifier": metadata.qualifier,
                "response_end_point": metadata.response_end_point or "",
                "gateway_timestamp": _iso(metadata.gateway_timestamp),
                "irmark_receipt": body.irmark_receipt or "",
                "accepted_time": _iso(body.accepted_time),
                "message": message,
            }
        )
    return rows


def make_response_table(metadata: EnvelopeMetadata, body: ResponseBody) -> pd.DataFrame:
    return pd.DataFrame(response_to_rows(metadata, body), columns=RESPONSE_COLUMNS)


def render_csv(metadata: EnvelopeMetadata, body: ResponseBody) -> bytes:
    rows = response_to_rows(metadata, body)
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=RESPONSE_COLUMNS)
    writer.writeheader()
    writer.writerows(rows)
    return buffer.getvalue().encode("utf-8")
