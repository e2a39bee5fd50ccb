from __future__ import annotations
import re
from enum import Enum
from typing import Dict


class ProtectedTag(Enum):
    """Heading tags emitted before escaping that must survive it verbatim."""

    H1_OPEN = "<h1>"
    H1_CLOSE = "</h1>"
    H2_OPEN = "<h2>"
    H2_CLOSE = "</h2>"
    H3_OPEN = "<h3>"
    H3_CLOSE = "</h3>"
    H4_OPEN = "<h4>"
    H4_CLOSE = "</h4>"
    H5_OPEN = "<h5>"
    H5_CLOSE = "</h5>"
    H6_OPEN = "<h6>"
    H6_CLOSE = "</h6>"

    @property
    def escaped(self) -> str:
        return self.value.replace("<", "&lt;").replace(">", "&gt;")


_ESCAPED_TO_TAG: Dict[str, ProtectedTag] = {tag.escaped: tag for tag in ProtectedTag}

_re_escaped_heading = re.compile(r"&lt;/?h[1-6]&gt;")


def restore_protected_tags(text: str) -> str:
    """Undo escaping for the twelve heading tag shapes only.

    Any other escaped angle bracket stays escaped.
    """

    def repl(m: re.Match[str]) -> str:
        return _ESCAPED_TO_TAG[m.group(0)].value

    return _re_escaped_heading.sub(repl, text)
