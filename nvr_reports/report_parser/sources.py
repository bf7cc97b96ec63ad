"""Read report files as plain text for the parsing engine."""
from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = {".txt", ".text"}


class DocumentReadError(RuntimeError):
    """Raised when a report file cannot be turned into text."""


def read_document(path: str | Path) -> str:
    """Return the UTF-8 text of a plain-text report file."""

    source = Path(path)
    if source.suffix.lower() not in SUPPORTED_EXTENSIONS:
        raise DocumentReadError(f"Unsupported report format: {source.name}")
    try:
        text = source.read_text(encoding="utf-8", errors="ignore")
    except OSError as exc:
        raise DocumentReadError(f"Failed to read {source}: {exc}") from exc
    logger.debug("Read %d characters from %s", len(text), source)
    return text
