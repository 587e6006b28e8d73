"""Application services orchestrating claim assembly and response reading."""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

from gift_aid_claims.application.assembly import ClaimAssembler
from gift_aid_claims.application.dto import ClaimInputContext
from gift_aid_claims.application.response_reader import ResponseReader
from gift_aid_claims.domain.models import Claim
from gift_aid_claims.domain.repositories import FailedMessageRepository
from gift_aid_claims.infrastructure.archive.failed_messages import FileSystemFailedMessageRepository
from gift_aid_claims.infrastructure.xml.envelope import EnvelopeSource, to_element

logger = logging.getLogger(__name__)


class AssembleClaimUseCase:
    def __init__(self, context: ClaimInputContext, assembler: ClaimAssembler | None = None) -> None:
        self._context = context
        self._assembler = assembler or ClaimAssembler()

    def execute(self) -> Claim:
        return self._assembler.assemble(self._context)


@dataclass(slots=True)
class ReadResponseUseCase:
    failed_messages: FailedMessageRepository = field(default_factory=FileSystemFailedMessageRepository)

    def execute(self, document: EnvelopeSource, failed_file_name: str | None = None) -> ResponseReader | None:
        """Read a submit response; ``None`` when the envelope is some other message.

        Unparseable documents still go through the reader so they are logged
        and archived before ``DeserializationError`` is raised.
        """
        try:
            root = to_element(document)
        except ET.ParseError:
            root = None
        if root is not None and not ResponseReader.is_match(root):
            logger.info("Envelope is not a submit response; skipping")
            return None
        reader = ResponseReader(self.failed_messages)
        reader.read_message(document, failed_file_name=failed_file_name)
        return reader
