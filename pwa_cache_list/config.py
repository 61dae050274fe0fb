"""Site configuration snapshot.

Loads the handful of site settings the cache lists depend on from a JSON
file shaped like the site generator's config:

    {
      "baseurl": "/blog",
      "tabs": [{"url": "/categories/"}, {"url": "/tags/"}],
      "google_analytics": {"pv": {"proxy_url": "...", "enabled": true}}
    }

Missing keys render the way the templating engine renders nil values (empty
strings / disabled). Field values are not validated.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from .errors import ExecFailureError
from .resolver import BaseUrlResolver, make_resolver, sanitize_baseurl


@dataclass(frozen=True)
class Tab:
    url: str


@dataclass(frozen=True)
class AnalyticsProxy:
    proxy_url: str = ""
    enabled: bool = False

    def is_active(self) -> bool:
        return bool(self.proxy_url) and self.enabled is True


@dataclass(frozen=True)
class SiteConfig:
    resolve: Callable[[str], str] = field(default_factory=BaseUrlResolver)
    tabs: tuple[Tab, ...] = ()
    analytics: AnalyticsProxy | None = None


def _as_text(value: object) -> str:
    # nil and false are falsy in the template and contribute nothing; true
    # renders lowercase.
    if value is None or value is False:
        return ""
    if value is True:
        return "true"
    return str(value)


def _tabs_from(raw: object) -> list[Tab]:
    if not isinstance(raw, list):
        return []
    tabs: list[Tab] = []
    for item in raw:
        url = item.get("url") if isinstance(item, Mapping) else None
        tabs.append(Tab(url=_as_text(url)))
    return tabs


def _analytics_from(raw: object) -> AnalyticsProxy | None:
    if not isinstance(raw, Mapping):
        return None
    pv = raw.get("pv")
    if not isinstance(pv, Mapping):
        return None
    return AnalyticsProxy(
        proxy_url=_as_text(pv.get("proxy_url")),
        enabled=pv.get("enabled") is True,
    )


def site_config_from_mapping(
    data: Mapping[str, Any],
    *,
    baseurl: str | None = None,
    extra_tabs: Iterable[str] = (),
) -> SiteConfig:
    if baseurl is not None:
        resolver = BaseUrlResolver(baseurl=sanitize_baseurl(baseurl))
    else:
        resolver = make_resolver(data)

    tabs = _tabs_from(data.get("tabs"))
    tabs.extend(Tab(url=_as_text(u)) for u in extra_tabs)

    return SiteConfig(
        resolve=resolver,
        tabs=tuple(tabs),
        analytics=_analytics_from(data.get("google_analytics")),
    )


def read_config_json(path: str | Path) -> dict[str, Any]:
    p = Path(path)
    try:
        raw = p.read_text(encoding="utf-8")
    except OSError as exc:
        raise ExecFailureError(f"Failed to read site config: {str(p)!r}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ExecFailureError(f"Invalid site config JSON: {str(p)!r}: {exc}") from exc

    if not isinstance(data, dict):
        raise ExecFailureError(
            f"Invalid site config JSON: {str(p)!r}: root must be object"
        )
    return data


def load_site_config(
    path: str | Path,
    *,
    baseurl: str | None = None,
    extra_tabs: Iterable[str] = (),
) -> SiteConfig:
    return site_config_from_mapping(
        read_config_json(path), baseurl=baseurl, extra_tabs=extra_tabs
    )
