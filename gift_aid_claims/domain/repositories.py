"""Repository interfaces anchoring the domain layer."""
from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FailedMessageRepository(Protocol):
    """Keeps unreadable gateway replies for later diagnosis."""

    def default_file_name(self) -> str:
        ...

    def save(self, file_name: str, content: bytes) -> Path:
        ...
