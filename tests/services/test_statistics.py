"""Tests for blog statistics."""

from itertools import permutations
from random import Random
from types import SimpleNamespace

import pytest

from bloglist.services.statistics import (
    favorite_blog,
    most_blogs,
    most_likes,
    summarize,
    total_likes,
)

BLOGS = [
    {"title": "React patterns", "author": "Michael Chan", "url": "https://reactpatterns.com/", "likes": 7},
    {
        "title": "Go To Statement Considered Harmful",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html",
        "likes": 5,
    },
    {
        "title": "Canonical string reduction",
        "author": "Edsger W. Dijkstra",
        "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
        "likes": 12,
    },
    {
        "title": "First class tests",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2017/05/05/TestDefinitions.htmll",
        "likes": 10,
    },
    {
        "title": "TDD harms architecture",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2017/03/03/TDD-Harms-Architecture.html",
        "likes": 0,
    },
    {
        "title": "Type wars",
        "author": "Robert C. Martin",
        "url": "http://blog.cleancoder.com/uncle-bob/2016/05/01/TypeWars.html",
        "likes": 2,
    },
]


class TestTotalLikes:
    def test_empty_list_is_zero(self) -> None:
        assert total_likes([]) == 0

    def test_single_blog_equals_its_likes(self) -> None:
        assert total_likes(BLOGS[:1]) == 7

    def test_bigger_list_is_summed(self) -> None:
        assert total_likes(BLOGS) == 36

    def test_missing_likes_count_as_zero(self) -> None:
        assert total_likes([{"title": "a"}, {"title": "b", "likes": 3}]) == 3


class TestFavoriteBlog:
    def test_empty_list_is_none(self) -> None:
        assert favorite_blog([]) is None

    def test_most_liked_is_returned(self) -> None:
        assert favorite_blog(BLOGS) == {
            "title": "Canonical string reduction",
            "author": "Edsger W. Dijkstra",
            "likes": 12,
        }

    def test_tie_keeps_earliest(self) -> None:
        blogs = [
            {"title": "first", "author": "A", "likes": 4},
            {"title": "second", "author": "B", "likes": 4},
        ]
        assert favorite_blog(blogs)["title"] == "first"

    def test_accepts_objects(self) -> None:
        blogs = [SimpleNamespace(title="x", author=None, likes=1)]
        assert favorite_blog(blogs) == {"title": "x", "author": None, "likes": 1}


class TestMostBlogs:
    def test_empty_list_is_none(self) -> None:
        assert most_blogs([]) is None

    def test_author_with_most_blogs(self) -> None:
        assert most_blogs(BLOGS) == {"author": "Robert C. Martin", "blogs": 3}

    def test_tie_picks_smallest_author(self) -> None:
        blogs = [{"author": "Zed"}, {"author": "Amy"}]
        assert most_blogs(blogs) == {"author": "Amy", "blogs": 1}

    def test_missing_author_sorts_first(self) -> None:
        blogs = [{"author": "Amy"}, {"author": None}]
        assert most_blogs(blogs) == {"author": None, "blogs": 1}


class TestMostLikes:
    def test_empty_list_is_none(self) -> None:
        assert most_likes([]) is None

    def test_author_with_most_likes(self) -> None:
        assert most_likes(BLOGS) == {"author": "Edsger W. Dijkstra", "likes": 17}

    @pytest.mark.parametrize(
        ("blogs", "expected"),
        [
            ([{"author": "B", "likes": 5}, {"author": "A", "likes": 5}], "A"),
            ([{"author": "A", "likes": 2}, {"author": "A", "likes": 3}, {"author": "B", "likes": 5}], "A"),
        ],
    )
    def test_tie_picks_smallest_author(self, blogs: list[dict], expected: str) -> None:
        assert most_likes(blogs)["author"] == expected


def test_summarize_bundles_every_statistic() -> None:
    result = summarize(BLOGS)

    assert result["total_blogs"] == 6
    assert result["total_likes"] == 36
    assert result["favorite_blog"]["likes"] == 12
    assert result["most_blogs"] == {"author": "Robert C. Martin", "blogs": 3}
    assert result["most_likes"] == {"author": "Edsger W. Dijkstra", "likes": 17}


def test_summarize_empty() -> None:
    assert summarize([]) == {
        "total_blogs": 0,
        "total_likes": 0,
        "favorite_blog": None,
        "most_blogs": None,
        "most_likes": None,
    }


class TestOrderIndependence:
    """Results that must not depend on the order blogs are listed in."""

    def test_total_likes_every_permutation(self) -> None:
        assert {total_likes(list(order)) for order in permutations(BLOGS)} == {36}

    def test_most_blogs_every_permutation(self) -> None:
        results = {tuple(most_blogs(list(order)).items()) for order in permutations(BLOGS)}
        assert results == {(("author", "Robert C. Martin"), ("blogs", 3))}

    def test_most_likes_every_permutation(self) -> None:
        results = {tuple(most_likes(list(order)).items()) for order in permutations(BLOGS)}
        assert results == {(("author", "Edsger W. Dijkstra"), ("likes", 17))}

    @pytest.mark.parametrize("seed", range(5))
    def test_shuffled_copies(self, seed: int) -> None:
        shuffled = list(BLOGS)
        Random(seed).shuffle(shuffled)

        assert total_likes(shuffled) == total_likes(BLOGS)
        assert most_blogs(shuffled) == most_blogs(BLOGS)
        assert most_likes(shuffled) == most_likes(BLOGS)
        assert most_blogs(list(reversed(BLOGS))) == most_blogs(BLOGS)
