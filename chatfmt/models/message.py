from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from chatfmt.services.markdown_service import format_message


@dataclass
class ChatMessage:
    """Represents one chat message whose content is written in Markdown.

    Attributes:
        role: Who produced the message ("assistant", "user", ...).
        content: The raw Markdown text of the message.
        source_path: Optional filesystem path the content was read from.
    """

    role: str
    content: str
    source_path: Optional[Path] = None

    @classmethod
    def from_file(cls, path: Path, content: str) -> "ChatMessage":
        return cls(role="assistant", content=content, source_path=path)

    def to_html(self) -> str:
        """Returns the content rendered as an HTML fragment."""
        return format_message(self.content)

    def to_text(self) -> str:
        return self.content
