from pathlib import Path

import pytest

from chatfmt.models.message import ChatMessage
from chatfmt.services.file_service import FileService


def test_file_service_read_and_write_html(tmp_path: Path):
    svc = FileService()

    src = tmp_path / "reply.md"
    src.write_text("# Hello\n- a", encoding="utf-8")
    msg = svc.read_message(src)
    assert msg.role == "assistant"
    assert msg.content == "# Hello\n- a"
    assert msg.source_path == src

    out = svc.write_html(msg, tmp_path / "out" / "reply")
    assert out.suffix == ".html"
    assert out.exists()
    assert out.read_text(encoding="utf-8") == "<h1>Hello</h1><br><ul><li>a</li></ul>"


def test_file_service_keeps_html_suffix(tmp_path: Path):
    svc = FileService()
    target = tmp_path / "page.HTML"
    assert svc.ensure_extension(target) == target


def test_file_service_missing_file_raises(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        FileService().read_message(tmp_path / "nope.md")


def test_write_html_uses_requested_encoding(tmp_path: Path):
    msg = ChatMessage(role="user", content="café")
    out = FileService().write_html(msg, tmp_path / "x.html", encoding="latin-1")
    assert out.read_bytes() == "café".encode("latin-1")
