from __future__ import annotations

from .builder import CacheLists

_JS_ESCAPES = {
    "\\": "\\\\",
    "'": "\\'",
    "\n": "\\n",
    "\r": "\\r",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}

# The tab pages are the only HTML the worker pre-caches.
_SUBHEADINGS = {"HTML": "Tabs"}


def js_string(value: str) -> str:
    """Quote `value` as a single-quoted JavaScript string literal."""

    return "'" + "".join(_JS_ESCAPES.get(ch, ch) for ch in value) + "'"


def _array_lines(
    name: str, items: list[str], *, comments: dict[int, str]
) -> list[str]:
    lines = [f"const {name} = ["]
    for i, item in enumerate(items):
        label = comments.get(i)
        if label is not None:
            if i > 0:
                lines.append("")
            lines.append(f"  /*--- {label} ---*/")
            sub = _SUBHEADINGS.get(label)
            if sub is not None:
                lines.append("")
                lines.append(f"  /* {sub} */")
        sep = "," if i < len(items) - 1 else ""
        lines.append(f"  {js_string(item)}{sep}")
    lines.append("];")
    return lines


def render_cache_list_js(lists: CacheLists) -> str:
    include: list[str] = []
    comments: dict[int, str] = {}
    for label, urls in lists.include_groups:
        if not urls:
            continue
        comments[len(include)] = label
        include.extend(urls)

    lines: list[str] = []
    lines.append("// Generated by pwa-cache-list. Do not edit.")
    lines.append("")
    lines.extend(_array_lines("include", include, comments=comments))
    lines.append("")
    lines.extend(_array_lines("exclude", list(lists.exclude), comments={}))
    return "\n".join(lines) + "\n"


def cache_lists_payload(lists: CacheLists) -> dict[str, object]:
    return {
        "schema_version": 1,
        "kind": "pwa_cache_list",
        "include": list(lists.include),
        "exclude": list(lists.exclude),
        "groups": [
            {"name": label, "urls": list(urls)} for label, urls in lists.include_groups
        ],
    }
