# SPDX-License-Identifier: AGPL-3.0-or-later
# Copyright (C) 2024 OCRMatch contributors

"""Command-line entry for decoding OCR payloads and running screen searches.

``decode`` turns a saved payload (or stdin) into JSON records. ``search``
runs the PowerShell OCR workflow against the current desktop and prints the
matches, optionally clicking one of them.
"""
from __future__ import annotations

import argparse
import dataclasses
import json
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from .decoding import MatchRecord, decode
from .errors import ContainerDecodeError, WorkflowError
from .workflow import OcrWorkflow, PowerShellRunner, WorkflowConfig


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ocrmatch", description=__doc__)
    sub = parser.add_subparsers(dest="command", required=True)

    dec = sub.add_parser("decode", help="Decode an OCR payload file and print its records")
    dec.add_argument("path", nargs="?", default="-", help="Payload file or '-' for stdin")
    dec.add_argument("--by-alias", action="store_true", help="Emit the OCR script's key spelling")
    dec.add_argument("--out", default="-", help="Output file path or '-' for stdout")

    search = sub.add_parser("search", help="Search the screen for text with the OCR script")
    search.add_argument("term", help="Text to look for")
    search.add_argument("--window", help="Activate the first window whose title contains this text")
    search.add_argument("--click", action="store_true", help="Click the selected match")
    search.add_argument("--index", type=int, default=0, help="Match to click when --click is set")
    search.add_argument("--script", help="OCR script path (overrides OCRMATCH_SCRIPT_PATH)")
    search.add_argument("--shell", help="PowerShell executable (overrides OCRMATCH_SHELL)")
    search.add_argument("--by-alias", action="store_true", help="Emit the OCR script's key spelling")
    search.add_argument("--out", default="-", help="Output file path or '-' for stdout")
    return parser


def _read_payload(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8-sig")


def _emit(records: Sequence[MatchRecord], *, by_alias: bool, out: str) -> None:
    payload = json.dumps(
        [record.model_dump(by_alias=by_alias) for record in records],
        ensure_ascii=False,
        indent=2,
    )
    if out == "-":
        print(payload)
    else:
        Path(out).write_text(payload, encoding="utf-8")


def _handle_decode(args: argparse.Namespace) -> int:
    try:
        records = decode(_read_payload(args.path))
    except ContainerDecodeError as exc:
        print(f"error: {exc.reason} (offset {exc.offset})", file=sys.stderr)
        return 2
    _emit(records, by_alias=args.by_alias, out=args.out)
    return 0


def build_workflow(args: argparse.Namespace) -> OcrWorkflow:
    config = WorkflowConfig.from_env(script_path=args.script)
    if args.shell:
        config = dataclasses.replace(config, shell=args.shell)
    runner = PowerShellRunner(shell=config.shell, timeout=config.command_timeout)
    return OcrWorkflow(config, runner)


def _handle_search(args: argparse.Namespace) -> int:
    try:
        workflow = build_workflow(args)
        if args.window and not workflow.activate_window(args.window):
            print(f"error: window '{args.window}' was not activated", file=sys.stderr)
            return 1
        if args.click:
            record = workflow.find_and_click(args.term, index=args.index)
            records: List[MatchRecord] = [record] if record is not None else []
        else:
            records = workflow.find_text(args.term)
    except ContainerDecodeError as exc:
        print(f"error: {exc.reason} (offset {exc.offset})", file=sys.stderr)
        return 2
    except (WorkflowError, IndexError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    _emit(records, by_alias=args.by_alias, out=args.out)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _parser().parse_args(list(argv) if argv is not None else None)
    if args.command == "decode":
        return _handle_decode(args)
    return _handle_search(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
