"""End-to-end tests for the blog endpoints."""

from collections.abc import Awaitable, Callable
from datetime import timedelta
from typing import Any
from uuid import uuid4

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select

from bloglist.db import transaction
from bloglist.managers.token_manager import create_access_token
from bloglist.models import CommentDB, UserDB

NEW_BLOG = {
    "title": "Canonical string reduction",
    "author": "Edsger W. Dijkstra",
    "url": "http://www.cs.utexas.edu/~EWD/transcriptions/EWD08xx/EWD808.html",
    "likes": 12,
}


async def create_blog(client: AsyncClient, headers: dict[str, str], **overrides: Any) -> dict:
    response = await client.post("/api/blogs", json={**NEW_BLOG, **overrides}, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_empty_blog_list(client: AsyncClient) -> None:
    response = await client.get("/api/blogs")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    assert response.json() == []


class TestCreateBlog:
    @pytest.mark.asyncio
    async def test_valid_blog_is_added(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        root_user: UserDB,
    ) -> None:
        blog = await create_blog(client, auth_headers)

        assert blog["title"] == NEW_BLOG["title"]
        assert blog["likes"] == 12
        assert blog["user"] == {"id": str(root_user.id), "username": "root", "name": "Superuser"}
        assert blog["comments"] == []
        assert "user_id" not in blog
        assert "comment_ids" not in blog

        listed = (await client.get("/api/blogs")).json()
        assert [b["id"] for b in listed] == [blog["id"]]

    @pytest.mark.asyncio
    async def test_blog_appears_on_owner(self, client: AsyncClient, auth_headers: dict[str, str]) -> None:
        blog = await create_blog(client, auth_headers)

        users = (await client.get("/api/users")).json()

        assert users[0]["blogs"] == [
            {
                "id": blog["id"],
                "title": NEW_BLOG["title"],
                "author": NEW_BLOG["author"],
                "url": NEW_BLOG["url"],
                "likes": 12,
            },
        ]

    @pytest.mark.asyncio
    async def test_likes_default_to_zero(self, client: AsyncClient, auth_headers: dict[str, str]) -> None:
        payload = {k: v for k, v in NEW_BLOG.items() if k != "likes"}

        response = await client.post("/api/blogs", json=payload, headers=auth_headers)

        assert response.status_code == 201
        assert response.json()["likes"] == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["title", "url"])
    async def test_missing_field_is_400(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        missing: str,
    ) -> None:
        payload = {k: v for k, v in NEW_BLOG.items() if k != missing}

        response = await client.post("/api/blogs", json=payload, headers=auth_headers)

        assert response.status_code == 400
        assert (await client.get("/api/blogs")).json() == []

    @pytest.mark.asyncio
    async def test_missing_token_is_401(self, client: AsyncClient) -> None:
        response = await client.post("/api/blogs", json=NEW_BLOG)

        assert response.status_code == 401
        assert response.json() == {"detail": "token missing or invalid"}

    @pytest.mark.asyncio
    async def test_expired_token_is_401(self, client: AsyncClient, root_user: UserDB) -> None:
        token = create_access_token(root_user.id, root_user.username, expires_delta=timedelta(seconds=-1))

        response = await client.post(
            "/api/blogs",
            json=NEW_BLOG,
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_token_for_deleted_user_is_401(self, client: AsyncClient) -> None:
        token = create_access_token(uuid4(), "ghost")

        response = await client.post(
            "/api/blogs",
            json=NEW_BLOG,
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401


class TestUpdateBlog:
    @pytest.mark.asyncio
    async def test_replaces_fields(self, client: AsyncClient, auth_headers: dict[str, str]) -> None:
        blog = await create_blog(client, auth_headers)

        response = await client.put(
            f"/api/blogs/{blog['id']}",
            json={**NEW_BLOG, "likes": 13},
        )

        assert response.status_code == 200
        assert response.json()["likes"] == 13
        assert response.json()["user"]["username"] == "root"

    @pytest.mark.asyncio
    async def test_unknown_id_returns_null(self, client: AsyncClient) -> None:
        response = await client.put(f"/api/blogs/{uuid4()}", json=NEW_BLOG)

        assert response.status_code == 200
        assert response.json() is None

    @pytest.mark.asyncio
    async def test_malformed_id_is_400(self, client: AsyncClient) -> None:
        response = await client.put("/api/blogs/not-a-uuid", json=NEW_BLOG)

        assert response.status_code == 400


class TestComments:
    @pytest.mark.asyncio
    async def test_comments_are_appended_in_order(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        blog = await create_blog(client, auth_headers)

        await client.post(f"/api/blogs/{blog['id']}/comments", json={"text": "first!"})
        response = await client.post(f"/api/blogs/{blog['id']}/comments", json={"text": "second"})

        assert response.status_code == 200
        assert [c["text"] for c in response.json()["comments"]] == ["first!", "second"]

        listed = (await client.get("/api/blogs")).json()
        assert [c["text"] for c in listed[0]["comments"]] == ["first!", "second"]

    @pytest.mark.asyncio
    async def test_short_comment_is_400(self, client: AsyncClient, auth_headers: dict[str, str]) -> None:
        blog = await create_blog(client, auth_headers)

        response = await client.post(f"/api/blogs/{blog['id']}/comments", json={"text": "x"})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_unknown_blog_is_404(self, client: AsyncClient) -> None:
        response = await client.post(f"/api/blogs/{uuid4()}/comments", json={"text": "hello"})

        assert response.status_code == 404


class TestDeleteBlog:
    @pytest.mark.asyncio
    async def test_owner_deletes(self, client: AsyncClient, auth_headers: dict[str, str]) -> None:
        blog = await create_blog(client, auth_headers)
        await client.post(f"/api/blogs/{blog['id']}/comments", json={"text": "bye bye"})

        response = await client.delete(f"/api/blogs/{blog['id']}", headers=auth_headers)

        assert response.status_code == 204
        assert response.content == b""
        assert (await client.get("/api/blogs")).json() == []
        assert (await client.get("/api/users")).json()[0]["blogs"] == []

        async with transaction() as session:
            result = await session.execute(select(func.count()).select_from(CommentDB))
            assert result.scalar() == 0

    @pytest.mark.asyncio
    async def test_unknown_id_is_204(self, client: AsyncClient, auth_headers: dict[str, str]) -> None:
        response = await client.delete(f"/api/blogs/{uuid4()}", headers=auth_headers)

        assert response.status_code == 204

    @pytest.mark.asyncio
    async def test_non_owner_is_401(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
        make_user: Callable[..., Awaitable[UserDB]],
    ) -> None:
        blog = await create_blog(client, auth_headers)
        other = await make_user(username="hellas", password="password")
        token = create_access_token(other.id, other.username)

        response = await client.delete(
            f"/api/blogs/{blog['id']}",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401
        assert response.json() == {"detail": "only the creator can modify or delete blogs"}
        assert len((await client.get("/api/blogs")).json()) == 1

    @pytest.mark.asyncio
    async def test_missing_token_is_401(self, client: AsyncClient, auth_headers: dict[str, str]) -> None:
        blog = await create_blog(client, auth_headers)

        response = await client.delete(f"/api/blogs/{blog['id']}")

        assert response.status_code == 401


@pytest.mark.asyncio
async def test_statistics(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    await create_blog(client, auth_headers)
    await create_blog(client, auth_headers, title="React patterns", author="Michael Chan", likes=7)
    await create_blog(client, auth_headers, title="Go To", likes=5)

    response = await client.get("/api/blogs/stats")

    assert response.status_code == 200
    assert response.json() == {
        "total_blogs": 3,
        "total_likes": 24,
        "favorite_blog": {
            "title": "Canonical string reduction",
            "author": "Edsger W. Dijkstra",
            "likes": 12,
        },
        "most_blogs": {"author": "Edsger W. Dijkstra", "blogs": 2},
        "most_likes": {"author": "Edsger W. Dijkstra", "likes": 17},
    }


class TestOrdering:
    @pytest.mark.asyncio
    async def test_blogs_listed_in_creation_order(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        titles = ["First class tests", "TDD harms architecture", "Type wars"]
        for title in titles:
            await create_blog(client, auth_headers, title=title)

        listed = (await client.get("/api/blogs")).json()

        assert [b["title"] for b in listed] == titles

    @pytest.mark.asyncio
    async def test_favorite_tie_is_earliest_blog(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        await create_blog(client, auth_headers, title="Older", likes=5)
        await create_blog(client, auth_headers, title="Newer", likes=5)

        stats = (await client.get("/api/blogs/stats")).json()

        assert stats["favorite_blog"]["title"] == "Older"


class TestLongFields:
    @pytest.mark.asyncio
    async def test_long_url_and_title_accepted(
        self,
        client: AsyncClient,
        auth_headers: dict[str, str],
    ) -> None:
        url = "https://example.com/" + "a" * 600
        title = "T" * 300

        blog = await create_blog(client, auth_headers, url=url, title=title)

        assert blog["url"] == url
        assert blog["title"] == title

    @pytest.mark.asyncio
    async def test_long_comment_accepted(self, client: AsyncClient, auth_headers: dict[str, str]) -> None:
        blog = await create_blog(client, auth_headers)
        text = "word " * 400

        response = await client.post(f"/api/blogs/{blog['id']}/comments", json={"text": text})

        assert response.status_code == 200
        assert response.json()["comments"][0]["text"] == text
