from pathlib import Path

from chatfmt.models.message import ChatMessage


def test_message_renders_content():
    msg = ChatMessage(role="assistant", content="**hi** <b>")
    assert msg.to_html() == "<strong>hi</strong> &lt;b&gt;"
    assert msg.to_text() == "**hi** <b>"


def test_message_from_file_defaults_to_assistant():
    path = Path("answers") / "a.md"
    msg = ChatMessage.from_file(path, "")
    assert msg.role == "assistant"
    assert msg.source_path == path
    assert msg.to_html() == ""
