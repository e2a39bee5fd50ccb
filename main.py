from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from chatfmt.models.message import ChatMessage
from chatfmt.services.config_service import RenderConfig, load_env_config
from chatfmt.services.file_service import FileService
from chatfmt.services.smoke_check import SAMPLE_MESSAGE, run_smoke_check

logger = logging.getLogger("chatfmt.cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chatfmt",
        description="Render a Markdown chat message as an HTML fragment.",
    )
    parser.add_argument("input", nargs="?", default=None, help="Markdown file (default: stdin)")
    parser.add_argument("--output", "-o", default=None, help="Write the HTML here instead of stdout")
    parser.add_argument("--sample", action="store_true", help="Render the built-in sample message")
    parser.add_argument("--check", action="store_true", help="Run the heading smoke check on the result")
    return parser


def _load_message(
    args: argparse.Namespace, config: RenderConfig, files: FileService
) -> Optional[ChatMessage]:
    if args.sample:
        return ChatMessage(role="assistant", content=SAMPLE_MESSAGE)
    if args.input is None:
        try:
            return ChatMessage(role="user", content=sys.stdin.read())
        except (OSError, UnicodeDecodeError) as exc:
            print(f"[chatfmt] failed to read stdin: {exc}", file=sys.stderr)
            return None
    try:
        return files.read_message(Path(args.input), encoding=config.encoding)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"[chatfmt] failed to read {args.input}: {exc}", file=sys.stderr)
        return None


def main(argv: Optional[List[str]] = None, config: Optional[RenderConfig] = None) -> int:
    args = _build_parser().parse_args(argv)
    config = config or load_env_config()
    logging.basicConfig(
        level=config.log_level_number,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    files = FileService()
    message = _load_message(args, config, files)
    if message is None:
        return 2

    html = message.to_html()
    if args.output:
        try:
            target = files.write_html(
                message, Path(args.output), encoding=config.encoding
            )
        except (OSError, UnicodeEncodeError) as exc:
            print(f"[chatfmt] failed to write {args.output}: {exc}", file=sys.stderr)
            return 2
        print(f"[chatfmt] wrote {target}", file=sys.stderr)
    else:
        print(html)

    if args.check or config.smoke_check:
        report = run_smoke_check(html)
        for result in report.results:
            mark = "OK" if result.passed else "FAIL"
            print(f"[{mark}] {result.name}: {result.message}", file=sys.stderr)
        if not report.ok:
            logger.warning("Smoke check failed for %s", args.input or "<stdin>")
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
