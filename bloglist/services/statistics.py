"""
Aggregate statistics over a list of blogs.

Every function here is pure: it takes a materialized sequence of blog records
and never touches the database. Records may be mappings (``{"likes": 3}``) or
objects exposing the same attributes (``BlogDB`` rows, response schemas).

Ties
----
``favorite_blog`` keeps the earliest of several equally liked blogs.
``most_blogs`` and ``most_likes`` pick the highest count; among authors with
the same count the lexicographically smallest name wins, with a missing
author sorting as the empty string.
"""

from collections import Counter, defaultdict
from collections.abc import Iterable, Mapping, Sequence
from typing import Any


def _field(blog: Any, name: str, default: Any = None) -> Any:
    if isinstance(blog, Mapping):
        return blog.get(name, default)
    return getattr(blog, name, default)


def _likes(blog: Any) -> int:
    return _field(blog, "likes") or 0


def _best_author(totals: Mapping[str | None, int]) -> tuple[str | None, int]:
    return min(totals.items(), key=lambda item: (-item[1], item[0] or ""))


def total_likes(blogs: Iterable[Any]) -> int:
    """Sum of likes across all blogs; 0 for an empty sequence."""
    return sum(_likes(blog) for blog in blogs)


def favorite_blog(blogs: Sequence[Any]) -> dict[str, Any] | None:
    """
    Return the most liked blog reduced to its title, author and likes.

    Args:
        blogs: Blog records

    Returns:
        dict | None: ``{"title", "author", "likes"}`` or None when empty
    """
    if not blogs:
        return None

    favorite = blogs[0]
    for blog in blogs[1:]:
        if _likes(blog) > _likes(favorite):
            favorite = blog

    return {
        "title": _field(favorite, "title"),
        "author": _field(favorite, "author"),
        "likes": _likes(favorite),
    }


def most_blogs(blogs: Sequence[Any]) -> dict[str, Any] | None:
    """
    Return the author with the most blogs.

    Returns:
        dict | None: ``{"author", "blogs"}`` or None when empty
    """
    if not blogs:
        return None

    counts = Counter(_field(blog, "author") for blog in blogs)
    author, count = _best_author(counts)
    return {"author": author, "blogs": count}


def most_likes(blogs: Sequence[Any]) -> dict[str, Any] | None:
    """
    Return the author whose blogs have the most likes in total.

    Returns:
        dict | None: ``{"author", "likes"}`` or None when empty
    """
    if not blogs:
        return None

    totals: defaultdict[str | None, int] = defaultdict(int)
    for blog in blogs:
        totals[_field(blog, "author")] += _likes(blog)

    author, likes = _best_author(totals)
    return {"author": author, "likes": likes}


def summarize(blogs: Sequence[Any]) -> dict[str, Any]:
    """Compute every statistic for the reporting endpoint."""
    return {
        "total_blogs": len(blogs),
        "total_likes": total_likes(blogs),
        "favorite_blog": favorite_blog(blogs),
        "most_blogs": most_blogs(blogs),
        "most_likes": most_likes(blogs),
    }
