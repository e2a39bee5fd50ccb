from __future__ import annotations
import logging
from pathlib import Path

from chatfmt.models.message import ChatMessage

logger = logging.getLogger(__name__)


class FileService:
    """Reads Markdown messages from disk and writes rendered HTML fragments."""

    def __init__(self, html_extension: str = ".html") -> None:
        self.html_extension = html_extension

    def ensure_extension(self, path: Path) -> Path:
        if path.suffix.lower() != self.html_extension:
            return path.with_suffix(self.html_extension)
        return path

    def read_message(self, path: Path, encoding: str = "utf-8") -> ChatMessage:
        # Missing or unreadable files propagate; the caller reports them
        text = path.read_text(encoding=encoding)
        return ChatMessage.from_file(path, text)

    def write_html(
        self, message: ChatMessage, path: Path, encoding: str = "utf-8"
    ) -> Path:
        target = self.ensure_extension(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(message.to_html(), encoding=encoding)
        logger.debug("Wrote HTML fragment to %s", target)
        return target
