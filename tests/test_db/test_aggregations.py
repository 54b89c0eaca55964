"""Tests for the catalog aggregation pipelines."""

from collections import defaultdict

import pytest

from bookstore.db.aggregations import (
    average_price_by_genre,
    average_price_by_genre_pipeline,
    books_by_decade,
    books_by_decade_pipeline,
    top_author,
    top_author_pipeline,
)
from bookstore.db.crud import BookCRUD
from bookstore.db.fixtures import SAMPLE_BOOKS
from tests.test_db.conftest import make_book


class TestPipelineBuilders:
    def test_average_price_by_genre_stages(self):
        pipeline = average_price_by_genre_pipeline()
        assert pipeline[0]["$group"]["_id"] == "$genre"
        assert pipeline[0]["$group"]["averagePrice"] == {"$avg": "$price"}
        assert pipeline[1] == {"$sort": {"averagePrice": -1, "_id": 1}}

    def test_top_author_stages(self):
        assert top_author_pipeline() == [
            {"$group": {"_id": "$author", "count": {"$sum": 1}}},
            {"$sort": {"count": -1, "_id": 1}},
            {"$limit": 1},
        ]

    def test_books_by_decade_has_no_match_stage(self):
        stages = [next(iter(stage)) for stage in books_by_decade_pipeline()]
        assert stages == ["$addFields", "$group", "$sort"]

    def test_builders_return_fresh_lists(self):
        first = top_author_pipeline()
        first.append({"$match": {}})
        assert len(top_author_pipeline()) == 3


class TestAveragePriceByGenre:
    def test_matches_arithmetic_mean(self, seeded):
        prices = defaultdict(list)
        for book in SAMPLE_BOOKS:
            prices[book.genre].append(book.price)

        stats = average_price_by_genre(seeded)

        assert {s.genre for s in stats} == set(prices)
        for s in stats:
            assert s.average_price == pytest.approx(sum(prices[s.genre]) / len(prices[s.genre]))
            assert s.count == len(prices[s.genre])

    def test_sorted_by_average_descending(self, seeded):
        stats = average_price_by_genre(seeded)
        assert [s.genre for s in stats] == [
            "Non-Fiction",
            "History",
            "Biography",
            "Science Fiction",
            "Fiction",
            "Mystery",
            "Fantasy",
            "Romance",
        ]

    def test_price_update_changes_only_that_genre(self, seeded):
        before = {s.genre: s.average_price for s in average_price_by_genre(seeded)}
        BookCRUD.update_price_by_title(seeded, "The Silent Orchard", 12.49)
        after = {s.genre: s.average_price for s in average_price_by_genre(seeded)}

        assert after["Fiction"] == pytest.approx(12.49)
        changed = {genre for genre in before if before[genre] != after[genre]}
        assert changed == {"Fiction"}

    def test_null_price_is_excluded(self, collection):
        collection.insert_many(
            [
                {"title": "A", "genre": "Poetry", "price": 10.0},
                {"title": "B", "genre": "Poetry", "price": 20.0},
                {"title": "C", "genre": "Poetry", "price": None},
            ]
        )
        [stats] = average_price_by_genre(collection)
        assert stats.average_price == pytest.approx(15.0)
        assert stats.count == 3

    def test_empty_collection(self, collection):
        assert average_price_by_genre(collection) == []


class TestTopAuthor:
    def test_fixture_top_author(self, seeded):
        result = top_author(seeded)
        assert result.author == "Samuel Reed"
        assert result.count == 3

    def test_tie_goes_to_lexicographically_first_author(self, collection):
        BookCRUD.insert_many(
            collection,
            [
                make_book(title="Z1", author="Zed"),
                make_book(title="A1", author="Abe"),
                make_book(title="Z2", author="Zed"),
                make_book(title="A2", author="Abe"),
            ],
        )
        result = top_author(collection)
        assert result.author == "Abe"
        assert result.count == 2

    def test_empty_collection_returns_none(self, collection):
        assert top_author(collection) is None


class TestBooksByDecade:
    def test_fixture_histogram(self, seeded):
        buckets = books_by_decade(seeded)
        assert [(b.decade, b.count) for b in buckets] == [
            (1990, 1),
            (2000, 2),
            (2010, 6),
            (2020, 3),
        ]

    def test_every_book_in_exactly_one_bucket(self, seeded):
        buckets = books_by_decade(seeded)
        all_titles = [title for bucket in buckets for title in bucket.titles]
        assert sorted(all_titles) == sorted(book.title for book in SAMPLE_BOOKS)
        assert sum(bucket.count for bucket in buckets) == BookCRUD.count(seeded)

    def test_bucket_titles_match_years(self, seeded):
        years = {book.title: book.published_year for book in SAMPLE_BOOKS}
        for bucket in books_by_decade(seeded):
            for title in bucket.titles:
                assert years[title] // 10 * 10 == bucket.decade

    def test_decade_boundaries(self, collection):
        BookCRUD.insert_many(
            collection,
            [
                make_book(title="Start", published_year=2010),
                make_book(title="End", published_year=2019),
                make_book(title="Next", published_year=2020),
            ],
        )
        buckets = books_by_decade(collection)
        assert [(b.decade, sorted(b.titles)) for b in buckets] == [
            (2010, ["End", "Start"]),
            (2020, ["Next"]),
        ]

    def test_recomputed_after_delete(self, seeded):
        BookCRUD.delete_by_title(seeded, "Memoirs of a Voyager")
        buckets = {b.decade: b.count for b in books_by_decade(seeded)}
        assert buckets[2000] == 1

    def test_record_without_year_gets_null_decade(self, collection):
        collection.insert_many([{"title": "A", "published_year": 2011}, {"title": "B"}])
        buckets = {b.decade: b for b in books_by_decade(collection)}
        assert set(buckets) == {None, 2010}
        assert buckets[None].titles == ["B"]
        assert buckets[2010].titles == ["A"]
        assert sum(b.count for b in buckets.values()) == 2
