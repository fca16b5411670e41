import unittest

from bookmark_insight.analysis.domain.aggregator import (
    aggregate,
    count_categories,
    count_duplicates,
    rank_domains,
)
from bookmark_insight.classification.domain.entities import ClassifiedBookmark


def _bookmark(url: str, domain: str, category: str = "Other", title: str = "t") -> ClassifiedBookmark:
    return ClassifiedBookmark(
        title=title,
        url=url,
        domain=domain,
        folder="Bookmarks",
        favicon=f"https://www.google.com/s2/favicons?domain={domain}",
        category=category,
    )


class AggregatorTests(unittest.TestCase):
    def test_duplicates_count_every_repeat(self):
        batch = [
            _bookmark("https://a.example/1", "a.example"),
            _bookmark("https://a.example/1", "a.example"),
            _bookmark("https://a.example/1", "a.example"),
            _bookmark("https://b.example/1", "b.example"),
        ]

        analysis = aggregate(batch)

        self.assertEqual(analysis.stats.duplicates, 2)
        self.assertEqual(analysis.stats.total_domains, 2)
        self.assertEqual(analysis.stats.total_bookmarks, 4)

    def test_no_duplicates(self):
        self.assertEqual(count_duplicates([_bookmark("https://a/1", "a"), _bookmark("https://a/2", "a")]), 0)

    def test_top_domains_descending_with_stable_ties(self):
        batch = (
            [_bookmark(f"https://x/{i}", "x") for i in range(5)]
            + [_bookmark(f"https://y/{i}", "y") for i in range(5)]
            + [_bookmark(f"https://z/{i}", "z") for i in range(10)]
        )

        analysis = aggregate(batch)

        self.assertEqual([(d.domain, d.count) for d in analysis.top_domains], [("z", 10), ("x", 5), ("y", 5)])

    def test_top_domains_truncated_to_ten(self):
        counts = {f"d{i}.example": 20 - i for i in range(15)}

        ranked = rank_domains(counts)

        self.assertEqual(len(ranked), 10)
        self.assertEqual(ranked[0].domain, "d0.example")
        self.assertEqual(ranked[-1].domain, "d9.example")

    def test_top_domains_limit_is_configurable(self):
        batch = [_bookmark(f"https://d{i}/", f"d{i}") for i in range(5)]
        self.assertEqual(len(aggregate(batch, top_domains_limit=3).top_domains), 3)

    def test_categories_in_first_seen_order_with_colors(self):
        batch = [
            _bookmark("https://1", "a", "Recipes"),
            _bookmark("https://2", "a", "Development"),
            _bookmark("https://3", "a", "Recipes"),
            _bookmark("https://4", "a", "Other"),
        ]

        categories = count_categories(batch)

        self.assertEqual(
            [(c.name, c.count, c.color) for c in categories],
            [("Recipes", 2, "#FFC107"), ("Development", 1, "#1976D2"), ("Other", 1, "#9E9E9E")],
        )

    def test_unknown_category_gets_other_color(self):
        categories = count_categories([_bookmark("https://1", "a", "Gardening")])
        self.assertEqual(categories[0].color, "#9E9E9E")

    def test_summary_counts(self):
        batch = [
            _bookmark("https://github.com/foo", "github.com", "Development"),
            _bookmark("https://allrecipes.com/r1", "allrecipes.com", "Recipes"),
            _bookmark("https://github.com/bar", "github.com", "Development"),
        ]

        stats = aggregate(batch).stats

        self.assertEqual(
            stats.to_dict(),
            {"totalBookmarks": 3, "totalCategories": 2, "totalDomains": 2, "duplicates": 0},
        )

    def test_empty_batch(self):
        analysis = aggregate([])
        self.assertEqual(analysis.categories, ())
        self.assertEqual(analysis.top_domains, ())
        self.assertEqual(analysis.stats.total_bookmarks, 0)
        self.assertEqual(analysis.stats.duplicates, 0)
