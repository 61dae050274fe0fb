"""Base-path resolution for site URLs.

Python rendition of the site generator's `relative_url` filter: prefix a
site-relative path with the configured `baseurl`.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import quote, urlsplit

# Reserved URI characters and existing escapes survive encoding.
_URL_SAFE = "/%:@!$&'()*+,;=?#[]"


def _ensure_leading_slash(value: str) -> str:
    if not value or value.startswith("/"):
        return value
    return "/" + value


def _is_absolute_url(value: str) -> bool:
    return bool(urlsplit(value).scheme)


def sanitize_baseurl(baseurl: str | None) -> str:
    if baseurl is None:
        return ""
    return str(baseurl).removesuffix("/")


def relative_url(path: str | None, *, baseurl: str | None = "") -> str:
    """Resolve `path` against `baseurl`.

    - `None` renders as an empty string
    - Absolute URLs (with a scheme) are returned unchanged
    - Otherwise both parts get a leading slash, are joined and percent-encoded
      (existing `%XX` escapes are kept)
    """

    if path is None:
        return ""
    p = str(path)
    if _is_absolute_url(p):
        return p

    parts = [sanitize_baseurl(baseurl), p]
    joined = "".join(_ensure_leading_slash(x) for x in parts)
    return quote(joined, safe=_URL_SAFE)


@dataclass(frozen=True)
class BaseUrlResolver:
    baseurl: str = ""

    def __call__(self, path: str) -> str:
        return relative_url(path, baseurl=self.baseurl)


def make_resolver(site: Mapping[str, object]) -> BaseUrlResolver:
    baseurl = site.get("baseurl")
    return BaseUrlResolver(
        baseurl=sanitize_baseurl(None if baseurl is None else str(baseurl))
    )
