"""Typed views of a GovTalk gateway envelope."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Sequence, Union


class ReaderState(Enum):
    NOT_READ = "not_read"
    READING = "reading"
    READ = "read"
    FAILED = "failed"


class ResultShape(Enum):
    CORRELATION_ID = "correlation_id"
    SUMMARY_LINES = "summary_lines"
    TABLE = "table"


@dataclass(frozen=True)
class EnvelopeMetadata:
    correlation_id: str
    qualifier: str
    function: str
    response_end_point: str | None = None
    poll_interval: int | None = None
    gateway_timestamp: datetime | None = None


@dataclass(frozen=True)
class SuccessBody:
    irmark_receipt: str | None = None
    accepted_time: datetime | None = None
    messages: Sequence[str] = field(default_factory=tuple)


@dataclass(frozen=True)
class PlaceholderBody:
    """Stands in for the success payload when the gateway sent an empty body."""

    message: str
    accepted_time: datetime | None = None

    @property
    def irmark_receipt(self) -> None:
        return None

    @property
    def messages(self) -> tuple[str, ...]:
        return (self.message,)


ResponseBody = Union[SuccessBody, PlaceholderBody]


@dataclass(frozen=True)
class GovTalkMessage:
    metadata: EnvelopeMetadata
    body: ResponseBody


@dataclass(frozen=True)
class Unsupported:
    """Returned for a projection the reader does not know how to produce."""

    requested: object

    def __bool__(self) -> bool:
        return False
