import threading
import unittest

from bookmark_insight.analysis.domain.aggregator import aggregate
from bookmark_insight.application.contracts import IngestResult
from bookmark_insight.classification.domain.entities import ClassifiedBookmark
from bookmark_insight.infrastructure.storage.memory_store import BookmarkQuery, InMemoryBookmarkStore


def _bookmark(i: int, category: str, domain: str, title: str | None = None) -> ClassifiedBookmark:
    return ClassifiedBookmark(
        title=title or f"Bookmark {i}",
        url=f"https://{domain}/{i}",
        domain=domain,
        folder="Bookmarks",
        favicon=f"https://www.google.com/s2/favicons?domain={domain}",
        category=category,
    )


def _result(bookmarks: list[ClassifiedBookmark]) -> IngestResult:
    analysis = aggregate(bookmarks)
    return IngestResult(
        bookmarks=tuple(bookmarks),
        categories=analysis.categories,
        top_domains=analysis.top_domains,
        stats=analysis.stats,
    )


class InMemoryBookmarkStoreTests(unittest.TestCase):
    def setUp(self):
        self.store = InMemoryBookmarkStore()
        bookmarks = [_bookmark(i, "Development", "github.com") for i in range(1, 16)]
        bookmarks += [_bookmark(i, "Recipes", "allrecipes.com") for i in range(16, 21)]
        bookmarks.append(_bookmark(21, "Other", "example.com", title="Quarterly GITHUB notes"))
        self.store.replace(_result(bookmarks))

    def test_new_store_is_empty(self):
        data = InMemoryBookmarkStore().get_analysis_data()
        self.assertEqual(data.bookmarks, ())
        self.assertEqual(data.stats.total_bookmarks, 0)

    def test_ids_are_one_based_in_batch_order(self):
        ids = [b.id for b in self.store.get_bookmarks()]
        self.assertEqual(ids, list(range(1, 22)))
        self.assertEqual([c.id for c in self.store.get_categories()], [1, 2, 3])

    def test_replace_restarts_ids_and_drops_old_batch(self):
        self.store.replace(_result([_bookmark(1, "Shopping", "amazon.com")]))

        bookmarks = self.store.get_bookmarks()
        self.assertEqual(len(bookmarks), 1)
        self.assertEqual(bookmarks[0].id, 1)
        self.assertEqual([c.name for c in self.store.get_categories()], ["Shopping"])

    def test_default_query_returns_first_page(self):
        page = self.store.query(BookmarkQuery())

        self.assertEqual(len(page.bookmarks), 10)
        self.assertEqual((page.page, page.limit, page.total, page.total_pages), (1, 10, 21, 3))

    def test_store_page_size_applies_when_limit_omitted(self):
        store = InMemoryBookmarkStore(page_size=4)
        store.replace(_result([_bookmark(i, "Development", "github.com") for i in range(1, 10)]))

        page = store.query(BookmarkQuery(page=3))
        self.assertEqual([b.id for b in page.bookmarks], [9])
        self.assertEqual((page.limit, page.total_pages), (4, 3))

    def test_last_page_is_partial(self):
        page = self.store.query(BookmarkQuery(page=3))
        self.assertEqual([b.id for b in page.bookmarks], [21])

    def test_page_past_end_is_empty(self):
        page = self.store.query(BookmarkQuery(page=9))
        self.assertEqual(page.bookmarks, ())
        self.assertEqual(page.total, 21)

    def test_category_filter(self):
        page = self.store.query(BookmarkQuery(category="Recipes"))
        self.assertEqual(page.total, 5)
        self.assertTrue(all(b.category == "Recipes" for b in page.bookmarks))

    def test_all_category_disables_filter(self):
        self.assertEqual(self.store.query(BookmarkQuery(category="all")).total, 21)

    def test_search_is_case_insensitive_across_fields(self):
        page = self.store.query(BookmarkQuery(search="GitHub", limit=50))
        # 15 by domain/url plus one by title.
        self.assertEqual(page.total, 16)

    def test_search_and_category_combine(self):
        page = self.store.query(BookmarkQuery(category="Other", search="github"))
        self.assertEqual([b.id for b in page.bookmarks], [21])

    def test_invalid_paging_raises(self):
        with self.assertRaises(ValueError):
            self.store.query(BookmarkQuery(page=0))
        with self.assertRaises(ValueError):
            self.store.query(BookmarkQuery(limit=0))

    def test_empty_result_has_zero_pages(self):
        page = self.store.query(BookmarkQuery(search="no-such-thing"))
        self.assertEqual((page.total, page.total_pages), (0, 0))

    def test_lookup_helpers(self):
        self.assertEqual(len(self.store.get_bookmarks_by_category("Development")), 15)
        self.assertEqual(len(self.store.search_bookmarks("ALLRECIPES")), 5)

    def test_analysis_data_payload(self):
        payload = self.store.get_analysis_data().to_dict()

        self.assertEqual(payload["stats"]["totalBookmarks"], 21)
        self.assertEqual(payload["topDomains"][0], {"domain": "github.com", "count": 15})
        self.assertEqual(payload["categories"][0], {"id": 1, "name": "Development", "count": 15, "color": "#1976D2"})

    def test_page_payload(self):
        payload = self.store.query(BookmarkQuery(page=2, limit=20)).to_dict()
        self.assertEqual(payload["pagination"], {"page": 2, "limit": 20, "total": 21, "totalPages": 2})

    def test_readers_never_see_partial_batch(self):
        small = _result([_bookmark(i, "Shopping", "amazon.com") for i in range(3)])
        large = _result([_bookmark(i, "Recipes", "allrecipes.com") for i in range(50)])
        seen: set[int] = set()
        stop = threading.Event()

        def reader():
            while not stop.is_set():
                seen.add(len(self.store.get_bookmarks()))

        thread = threading.Thread(target=reader)
        thread.start()
        try:
            for _ in range(200):
                self.store.replace(small)
                self.store.replace(large)
        finally:
            stop.set()
            thread.join()

        self.assertTrue(seen <= {21, 3, 50})
