"""Filesystem repository for gateway replies that could not be read."""
from __future__ import annotations

import logging
import re
from datetime import datetime
from pathlib import Path

from gift_aid_claims.config import SETTINGS

logger = logging.getLogger(__name__)


def _normalize_file_name(file_name: str) -> str:
    name = Path(file_name.strip()).name
    stem, dot, suffix = name.rpartition(".")
    if not dot:
        stem, suffix = name, "xml"
    stem = re.sub(r"[^0-9A-Za-z_-]+", "_", stem).strip("_")
    suffix = re.sub(r"[^0-9A-Za-z]+", "", suffix) or "xml"
    return f"{stem or 'message'}.{suffix}"


class FileSystemFailedMessageRepository:
    def __init__(self, root: Path | None = None, prefix: str = "GovTalkMessage") -> None:
        self._root = Path(root) if root is not None else SETTINGS.failed_messages_dir
        self._prefix = prefix

    @property
    def root(self) -> Path:
        return self._root

    def default_file_name(self) -> str:
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S_%f")
        return f"{self._prefix}_{stamp}_reply.xml"

    def save(self, file_name: str, content: bytes) -> Path:
        self._root.mkdir(parents=True, exist_ok=True)
        target = self._root / _normalize_file_name(file_name)
        target.write_bytes(content)
        logger.info("Saved reply document to %s", target)
        return target
