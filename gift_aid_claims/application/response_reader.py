"""Reader for the gateway's response to a claim submission."""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

import pandas as pd

from gift_aid_claims.config import SETTINGS
from gift_aid_claims.domain.envelope import (
    EnvelopeMetadata,
    GovTalkMessage,
    PlaceholderBody,
    ReaderState,
    ResponseBody,
    ResultShape,
    Unsupported,
)
from gift_aid_claims.domain.errors import DeserializationError, NotReadError, ReaderReusedError
from gift_aid_claims.domain.repositories import FailedMessageRepository
from gift_aid_claims.infrastructure.archive.failed_messages import FileSystemFailedMessageRepository
from gift_aid_claims.infrastructure.xml.envelope import (
    EnvelopeSource,
    body_payload,
    deserialize_metadata,
    deserialize_success_response,
    header_value,
    to_bytes,
    to_element,
)
from gift_aid_claims.presentation.response_table import make_response_table

logger = logging.getLogger(__name__)

_READ_ERRORS = (ET.ParseError, ValueError, TypeError, AttributeError)


class ResponseReader:
    """Reads a ``response``/``submit`` envelope.

    A reader handles exactly one message: ``NOT_READ -> READING -> READ``, or
    ``FAILED`` when the envelope cannot be deserialized. Results are only
    available in ``READ``.
    """

    QUALIFIER = "response"
    FUNCTION = "submit"

    def __init__(self, failed_messages: FailedMessageRepository | None = None) -> None:
        self._failed_messages = failed_messages or FileSystemFailedMessageRepository()
        self._state = ReaderState.NOT_READ
        self._message: GovTalkMessage | None = None

    @classmethod
    def is_match(cls, document: EnvelopeSource) -> bool:
        root = to_element(document)
        qualifier = header_value(root, "Qualifier")
        function = header_value(root, "Function")
        return qualifier == cls.QUALIFIER and function == cls.FUNCTION

    @property
    def state(self) -> ReaderState:
        return self._state

    def read_message(self, document: EnvelopeSource, failed_file_name: str | None = None) -> None:
        if self._state is not ReaderState.NOT_READ:
            raise ReaderReusedError(self._state.value)
        self._state = ReaderState.READING
        try:
            root = to_element(document)
            metadata = deserialize_metadata(root)
            payload = body_payload(root)
            if payload is not None:
                body: ResponseBody = deserialize_success_response(payload)
            else:
                logger.warning("Response %s has an empty Body", metadata.correlation_id)
                body = PlaceholderBody(
                    message=SETTINGS.placeholder_notice,
                    accepted_time=metadata.gateway_timestamp,
                )
        except _READ_ERRORS as exc:
            self._state = ReaderState.FAILED
            logger.exception("Message reading exception")
            file_name = failed_file_name or self._failed_messages.default_file_name()
            logger.info("Attempting to save reply document to %s", file_name)
            try:
                saved_to = self._failed_messages.save(file_name, to_bytes(document))
            except OSError:
                logger.exception("Could not archive reply document")
                saved_to = None
            raise DeserializationError(exc, saved_to=saved_to) from exc
        except Exception:
            self._state = ReaderState.FAILED
            raise

        self._message = GovTalkMessage(metadata=metadata, body=body)
        self._state = ReaderState.READ
        logger.info("Message read. Response type is %s.", type(body).__name__)

    def _read(self) -> GovTalkMessage:
        if self._state is not ReaderState.READ or self._message is None:
            raise NotReadError()
        return self._message

    @property
    def message(self) -> GovTalkMessage:
        return self._read()

    @property
    def metadata(self) -> EnvelopeMetadata:
        return self._read().metadata

    @property
    def body(self) -> ResponseBody:
        return self._read().body

    @property
    def body_type(self) -> str:
        return type(self.body).__name__

    @property
    def correlation_id(self) -> str:
        return self.metadata.correlation_id

    @property
    def qualifier(self) -> str:
        return self.metadata.qualifier

    @property
    def function(self) -> str:
        return self.metadata.function

    def has_errors(self) -> bool:
        return False

    def as_correlation_id(self) -> str:
        correlation_id = self.correlation_id
        logger.info("Response CorrelationId is %s", correlation_id)
        return correlation_id

    def as_summary_lines(self) -> list[str]:
        metadata = self.metadata
        body = self.body
        timestamp = metadata.gateway_timestamp
        lines = [
            f"CorrelationId::{metadata.correlation_id}",
            f"Qualifier::{metadata.qualifier}",
            f"ResponseEndPoint::{metadata.response_end_point or ''}",
            f"GatewayTimestamp::{timestamp.isoformat() if timestamp else 'NOT_SPECIFIED'}",
            f"IRmarkReceipt::{body.irmark_receipt}" if body.irmark_receipt is not None else "IRmarkReceipt::NONE",
            f"AcceptedTime::{body.accepted_time.isoformat()}"
            if body.accepted_time is not None
            else "AcceptedTime::NOT_SPECIFIED",
        ]
        logger.info("Response CorrelationId is %s", metadata.correlation_id)
        return lines

    def as_table(self) -> pd.DataFrame:
        message = self._read()
        return make_response_table(message.metadata, message.body)

    def results_as(self, shape: object) -> str | list[str] | pd.DataFrame | Unsupported:
        self._read()
        if shape is ResultShape.CORRELATION_ID:
            return self.as_correlation_id()
        if shape is ResultShape.SUMMARY_LINES:
            return self.as_summary_lines()
        if shape is ResultShape.TABLE:
            return self.as_table()
        return Unsupported(requested=shape)
