"""Artifacts writer.

Generated lists are written where the site expects them; the run record is
written under `./.pwa-cache-list/`.
"""

from __future__ import annotations

import json
import os
from datetime import datetime, timezone

DEFAULT_JS_PATH = os.path.join("assets", "js", "data", "cache-list.js")


def now_utc_z() -> str:
    return (
        datetime.now(timezone.utc).replace(microsecond=0).strftime("%Y-%m-%dT%H:%M:%SZ")
    )


def ensure_artifacts_dir(base_dir: str) -> str:
    out_dir = os.path.join(base_dir, ".pwa-cache-list")
    os.makedirs(out_dir, exist_ok=True)
    return out_dir


def _ensure_parent(path: str) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


def _atomic_write_text(path: str, content: str) -> None:
    _ensure_parent(path)
    tmp = f"{path}.tmp"
    with open(tmp, "w", encoding="utf-8", newline="\n") as fh:
        fh.write(content)
        if not content.endswith("\n"):
            fh.write("\n")
    os.replace(tmp, path)


def _atomic_write_json(path: str, payload: object) -> None:
    _ensure_parent(path)
    tmp = f"{path}.tmp"
    with open(tmp, "w", encoding="utf-8", newline="\n") as fh:
        fh.write(json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True))
        fh.write("\n")
    os.replace(tmp, path)


def write_cache_list_js(path: str, content: str) -> str:
    _atomic_write_text(path, content)
    return path


def write_cache_list_json(path: str, payload: dict[str, object]) -> str:
    _atomic_write_json(path, payload)
    return path


def write_run_json(out_dir: str, payload: dict[str, object]) -> str:
    path = os.path.join(out_dir, "run.json")
    _atomic_write_json(path, payload)
    return path
