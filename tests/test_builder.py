from __future__ import annotations

import unittest


EXPECTED_NO_TABS = [
    "/assets/css/home.css",
    "/assets/css/categories.css",
    "/assets/css/tags.css",
    "/assets/css/archives.css",
    "/assets/css/page.css",
    "/assets/css/post.css",
    "/assets/css/category-tag.css",
    "/assets/css/lib/bootstrap-toc.min.css",
    "/assets/js/home.min.js",
    "/assets/js/page.min.js",
    "/assets/js/post.min.js",
    "/assets/js/categories.min.js",
    "/assets/img/favicons/favicon.ico",
    "/assets/img/favicons/apple-icon.png",
    "/assets/img/favicons/apple-icon-precomposed.png",
    "/assets/img/favicons/android-icon-192x192.png",
    "/assets/img/favicons/ms-icon-150x150.png",
    "/assets/img/favicons/manifest.json",
    "/assets/img/favicons/browserconfig.xml",
    "/assets/js/data/search.json",
    "/404.html",
    "/app.js",
    "/sw.js",
]


class TestBuildCacheLists(unittest.TestCase):
    def test_zero_tabs_analytics_disabled(self) -> None:
        from pwa_cache_list.builder import build_cache_lists
        from pwa_cache_list.config import SiteConfig

        lists = build_cache_lists(SiteConfig())

        self.assertEqual(list(lists.include), EXPECTED_NO_TABS)
        self.assertEqual(
            list(lists.exclude),
            ["/assets/js/data/pageviews.json", "/img.shields.io/"],
        )

    def test_tabs_are_inserted_verbatim_after_scripts(self) -> None:
        from pwa_cache_list.builder import build_cache_lists
        from pwa_cache_list.config import SiteConfig, Tab
        from pwa_cache_list.resolver import BaseUrlResolver

        tabs = (Tab(url="/tags/"), Tab(url="/categories/"), Tab(url="/about/"))
        lists = build_cache_lists(
            SiteConfig(resolve=BaseUrlResolver(baseurl="/blog"), tabs=tabs)
        )

        self.assertEqual(len(lists.include), 23 + len(tabs))
        # Tab URLs are not resolved against baseurl.
        self.assertEqual(
            list(lists.include[12:15]), ["/tags/", "/categories/", "/about/"]
        )
        self.assertEqual(lists.include[11], "/blog/assets/js/categories.min.js")
        self.assertEqual(lists.include[15], "/blog/assets/img/favicons/favicon.ico")

    def test_baseurl_applies_to_resolved_paths_but_not_excludes(self) -> None:
        from pwa_cache_list.builder import build_cache_lists
        from pwa_cache_list.config import SiteConfig
        from pwa_cache_list.resolver import BaseUrlResolver

        lists = build_cache_lists(SiteConfig(resolve=BaseUrlResolver(baseurl="/blog")))

        self.assertEqual(lists.include[0], "/blog/assets/css/home.css")
        self.assertEqual(lists.include[-2:], ("/blog/app.js", "/blog/sw.js"))
        self.assertEqual(
            lists.exclude, ("/assets/js/data/pageviews.json", "/img.shields.io/")
        )

    def test_icon_directory_is_resolved_once(self) -> None:
        from pwa_cache_list.builder import build_cache_lists
        from pwa_cache_list.config import SiteConfig

        calls: list[str] = []

        def resolve(path: str) -> str:
            calls.append(path)
            return "https://cdn.example" + path

        lists = build_cache_lists(SiteConfig(resolve=resolve))

        self.assertEqual(calls.count("/assets/img/favicons"), 1)
        # 8 stylesheets + 4 scripts + icon dir + 2 misc + 2 root
        self.assertEqual(len(calls), 17)
        self.assertIn(
            "https://cdn.example/assets/img/favicons/manifest.json", lists.include
        )

    def test_proxy_url_excluded_first_when_enabled(self) -> None:
        from pwa_cache_list.builder import build_cache_lists
        from pwa_cache_list.config import AnalyticsProxy, SiteConfig

        proxy = "https://proxy.example.com/query?id=abc"
        lists = build_cache_lists(
            SiteConfig(analytics=AnalyticsProxy(proxy_url=proxy, enabled=True))
        )

        self.assertEqual(
            list(lists.exclude),
            [proxy, "/assets/js/data/pageviews.json", "/img.shields.io/"],
        )

    def test_proxy_url_omitted_when_disabled_or_empty(self) -> None:
        from pwa_cache_list.builder import build_cache_lists
        from pwa_cache_list.config import AnalyticsProxy, SiteConfig

        for analytics in (
            AnalyticsProxy(proxy_url="https://proxy.example.com", enabled=False),
            AnalyticsProxy(proxy_url="", enabled=True),
            None,
        ):
            with self.subTest(analytics=analytics):
                lists = build_cache_lists(SiteConfig(analytics=analytics))
                self.assertEqual(len(lists.exclude), 2)
                self.assertEqual(lists.exclude[0], "/assets/js/data/pageviews.json")

    def test_duplicates_are_preserved(self) -> None:
        from pwa_cache_list.builder import build_cache_lists
        from pwa_cache_list.config import SiteConfig, Tab

        lists = build_cache_lists(SiteConfig(tabs=(Tab(url="/404.html"),)))

        self.assertEqual(lists.include.count("/404.html"), 2)
        self.assertEqual(len(lists.include), 24)

    def test_build_is_deterministic_and_never_none(self) -> None:
        from pwa_cache_list.builder import build_cache_lists
        from pwa_cache_list.config import AnalyticsProxy, SiteConfig, Tab

        config = SiteConfig(
            tabs=(Tab(url="/archives/"), Tab(url="")),
            analytics=AnalyticsProxy(proxy_url="https://p.example", enabled=True),
        )

        a = build_cache_lists(config)
        b = build_cache_lists(config)

        self.assertEqual(a, b)
        self.assertEqual(a.include, b.include)
        for item in a.include + a.exclude:
            self.assertIsInstance(item, str)

    def test_include_groups_concatenate_to_include(self) -> None:
        from pwa_cache_list.builder import build_cache_lists
        from pwa_cache_list.config import SiteConfig, Tab

        lists = build_cache_lists(SiteConfig(tabs=(Tab(url="/tags/"),)))

        names = [name for name, _ in lists.include_groups]
        self.assertEqual(names, ["CSS", "Javascripts", "HTML", "Icons", "Others"])
        flat = [u for _, urls in lists.include_groups for u in urls]
        self.assertEqual(flat, list(lists.include))


if __name__ == "__main__":
    raise SystemExit(unittest.main())
