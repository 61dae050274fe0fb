"""Service worker cache list generator.

Builds the include/exclude URL lists a static site's service worker
pre-caches (or skips) and renders them as `cache-list.js`.
"""

from .builder import CacheLists, build_cache_lists
from .config import AnalyticsProxy, SiteConfig, Tab, load_site_config
from .resolver import BaseUrlResolver, relative_url

__all__ = [
    "AnalyticsProxy",
    "BaseUrlResolver",
    "CacheLists",
    "SiteConfig",
    "Tab",
    "build_cache_lists",
    "load_site_config",
    "relative_url",
]
