"""CLI entrypoint for pwa-cache-list.

`pwa-cache-list build` loads the site config, builds the cache lists and
writes `cache-list.js`. Every invocation leaves a run record in
`.pwa-cache-list/run.json`, including failed ones.
"""

from __future__ import annotations

import argparse
import json
import os
import sys
import time
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, NoReturn

from .artifacts import (
    DEFAULT_JS_PATH,
    ensure_artifacts_dir,
    now_utc_z,
    write_cache_list_js,
    write_cache_list_json,
    write_run_json,
)
from .builder import build_cache_lists
from .config import load_site_config
from .errors import ExecFailureError, ExitCode
from .render import cache_lists_payload, render_cache_list_js
from .validate.cache_list_json import validate_cache_list_json

_PREFIX = "[pwa-cache-list]"


@dataclass(frozen=True)
class ParserExit(Exception):
    code: int
    message: str = ""


class ThrowingArgumentParser(argparse.ArgumentParser):
    def exit(self, status: int = 0, message: str | None = None) -> NoReturn:  # type: ignore[override]
        if message:
            self._print_message(message, sys.stderr if status else sys.stdout)
        raise ParserExit(status, message or "")

    def error(self, message: str) -> NoReturn:  # type: ignore[override]
        self.print_usage(sys.stderr)
        self._print_message(f"{self.prog}: error: {message}\n", sys.stderr)
        raise ParserExit(2, f"{self.prog}: error: {message}\n")


def build_parser() -> ThrowingArgumentParser:
    parser = ThrowingArgumentParser(prog="pwa-cache-list")
    sub = parser.add_subparsers(dest="command", required=True)

    build = sub.add_parser("build", help="Generate the service worker cache list")
    build.add_argument("--config", required=True, help="Site config JSON file")
    build.add_argument("--baseurl", default=None, help="Override the config's baseurl")
    # Tab URLs are cached as written, so no type conversion here.
    build.add_argument(
        "--tab",
        dest="tabs",
        action="append",
        default=[],
        help="Extra tab URL, appended after configured tabs (repeatable)",
    )
    build.add_argument("--out", default=None, help="Output cache-list.js path")
    build.add_argument("--json-out", default=None, help="Also write a JSON payload")

    return parser


def _rel(path: str) -> str:
    return os.path.relpath(path, os.getcwd()) if path else ""


def handle_build(args: argparse.Namespace) -> dict[str, Any]:
    config = load_site_config(args.config, baseurl=args.baseurl, extra_tabs=args.tabs)
    lists = build_cache_lists(config)

    payload = cache_lists_payload(lists)
    validate_cache_list_json(payload)

    out_path = args.out or os.path.join(os.getcwd(), DEFAULT_JS_PATH)
    js_path = write_cache_list_js(out_path, render_cache_list_js(lists))
    json_path = write_cache_list_json(args.json_out, payload) if args.json_out else ""

    return {
        "action": "build",
        "include_count": len(lists.include),
        "exclude_count": len(lists.exclude),
        "artifacts": {
            "cache_list_js": _rel(js_path),
            "cache_list_json": _rel(json_path),
        },
    }


@dataclass
class RunRecord:
    argv: list[str]
    started_at: str = field(default_factory=now_utc_z)
    t0: float = field(default_factory=time.monotonic)
    status: str = "unknown"
    exit_code: int = int(ExitCode.EXEC_FAILURE)
    result: dict[str, Any] = field(default_factory=dict)
    error: dict[str, Any] | None = None

    def succeed(self, status: str, result: dict[str, Any] | None = None) -> None:
        self.status = status
        self.exit_code = int(ExitCode.SUCCESS)
        self.result = result or {}

    def fail(self, status: str, error: dict[str, Any]) -> None:
        self.status = status
        self.exit_code = int(ExitCode.EXEC_FAILURE)
        self.error = error

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "schema_version": 1,
            "started_at": self.started_at,
            "ended_at": now_utc_z(),
            "duration_ms": int((time.monotonic() - self.t0) * 1000),
            "argv": self.argv,
            "cwd": os.getcwd(),
            "status": self.status,
            "exit_code": self.exit_code,
            "result": self.result,
        }
        if self.error is not None:
            payload["error"] = self.error
        return payload


def _run(record: RunRecord) -> None:
    try:
        args = build_parser().parse_args(record.argv)
    except ParserExit as exc:
        # argparse already printed usage/help.
        if exc.code == 0:
            record.succeed("help")
        else:
            record.fail("invalid_args", {"message": exc.message.strip("\n")})
        return

    try:
        result = handle_build(args)
    except ExecFailureError as exc:
        print(f"{_PREFIX} ERROR: {exc}", file=sys.stderr)
        record.fail("exec_failure", {"message": str(exc)})
        return
    except Exception as exc:  # noqa: BLE001
        print(f"{_PREFIX} ERROR: {type(exc).__name__}: {exc}", file=sys.stderr)
        record.fail("exec_failure", {"type": type(exc).__name__, "message": str(exc)})
        return

    record.succeed("ok", result)
    print(json.dumps(result, ensure_ascii=False, sort_keys=True))


def main(argv: Iterable[str] | None = None) -> int:
    record = RunRecord(argv=list(argv) if argv is not None else sys.argv[1:])
    _run(record)

    try:
        write_run_json(ensure_artifacts_dir(os.getcwd()), record.to_payload())
    except OSError as exc:
        print(f"{_PREFIX} ERROR: failed to write run record: {exc}", file=sys.stderr)
        return int(ExitCode.EXEC_FAILURE)

    return record.exit_code


if __name__ == "__main__":
    raise SystemExit(main())
