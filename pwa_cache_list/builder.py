"""Include/exclude list construction for the service worker cache.

The include list is grouped in a fixed order: stylesheets, scripts, tab
pages, icons, misc pages and root-level scripts. Nothing is sorted,
deduplicated or validated; the lists are consumed as-is by `sw.js`.
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import SiteConfig

STYLESHEETS: tuple[str, ...] = (
    "/assets/css/home.css",
    "/assets/css/categories.css",
    "/assets/css/tags.css",
    "/assets/css/archives.css",
    "/assets/css/page.css",
    "/assets/css/post.css",
    "/assets/css/category-tag.css",
    "/assets/css/lib/bootstrap-toc.min.css",
)

SCRIPTS: tuple[str, ...] = (
    "/assets/js/home.min.js",
    "/assets/js/page.min.js",
    "/assets/js/post.min.js",
    "/assets/js/categories.min.js",
)

ICON_DIR = "/assets/img/favicons"

ICON_FILES: tuple[str, ...] = (
    "favicon.ico",
    "apple-icon.png",
    "apple-icon-precomposed.png",
    "android-icon-192x192.png",
    "ms-icon-150x150.png",
    "manifest.json",
    "browserconfig.xml",
)

MISC_PAGES: tuple[str, ...] = (
    "/assets/js/data/search.json",
    "/404.html",
)

ROOT_SCRIPTS: tuple[str, ...] = (
    "/app.js",
    "/sw.js",
)

# Not resolved against baseurl: matched by the service worker as written.
PAGEVIEWS_DATA = "/assets/js/data/pageviews.json"
SHIELDS_PATTERN = "/img.shields.io/"


@dataclass(frozen=True)
class CacheLists:
    include_groups: tuple[tuple[str, tuple[str, ...]], ...]
    exclude: tuple[str, ...]

    @property
    def include(self) -> tuple[str, ...]:
        return tuple(url for _, urls in self.include_groups for url in urls)


def build_include_groups(
    config: SiteConfig,
) -> tuple[tuple[str, tuple[str, ...]], ...]:
    resolve = config.resolve

    # Resolved once; every icon shares the directory prefix.
    icon_url = resolve(ICON_DIR)

    return (
        ("CSS", tuple(resolve(p) for p in STYLESHEETS)),
        ("Javascripts", tuple(resolve(p) for p in SCRIPTS)),
        ("HTML", tuple(tab.url for tab in config.tabs)),
        ("Icons", tuple(f"{icon_url}/{name}" for name in ICON_FILES)),
        ("Others", tuple(resolve(p) for p in MISC_PAGES + ROOT_SCRIPTS)),
    )


def build_exclude(config: SiteConfig) -> tuple[str, ...]:
    out: list[str] = []
    if config.analytics is not None and config.analytics.is_active():
        out.append(config.analytics.proxy_url)
    out.append(PAGEVIEWS_DATA)
    out.append(SHIELDS_PATTERN)
    return tuple(out)


def build_cache_lists(config: SiteConfig) -> CacheLists:
    return CacheLists(
        include_groups=build_include_groups(config),
        exclude=build_exclude(config),
    )
