"""
Blog API Backend — /posts Endpoint Tests
=========================================

What:  End-to-end tests of the five post routes against SQLite, with a focus
       on author population and the absence of any referential check.
"""

import uuid

import pytest


@pytest.fixture
def post_payload():
    return {"title": "First post", "content": "Hello, world."}


def author_of(user):
    return {
        "id": user["id"],
        "firstName": user["firstName"],
        "lastName": user["lastName"],
        "email": user["email"],
    }


class TestCreatePost:
    """POST /posts"""

    @pytest.mark.asyncio
    async def test_create_post_is_populated(self, test_client, make_user, post_payload):
        user = await make_user()

        response = await test_client.post("/posts", json={**post_payload, "userId": user["id"]})

        assert response.status_code == 200
        body = response.json()
        uuid.UUID(body["id"])
        assert body["title"] == "First post"
        assert body["content"] == "Hello, world."
        assert body["userId"] == author_of(user)
        assert "createdAt" in body and "updatedAt" in body

    @pytest.mark.asyncio
    async def test_unknown_author_is_accepted(self, test_client, post_payload):
        ghost = str(uuid.uuid4())

        created = await test_client.post("/posts", json={**post_payload, "userId": ghost})
        fetched = await test_client.get(f"/posts/{created.json()['id']}")

        assert created.status_code == 200
        assert created.json()["userId"] is None
        assert fetched.status_code == 200
        assert fetched.json()["userId"] is None

    @pytest.mark.asyncio
    async def test_missing_user_id_is_400(self, test_client, post_payload):
        response = await test_client.post("/posts", json=post_payload)

        assert response.status_code == 400
        assert response.json() == {"error": "title, content, and userId are required"}

    @pytest.mark.asyncio
    async def test_malformed_user_id_is_500(self, test_client, post_payload):
        response = await test_client.post("/posts", json={**post_payload, "userId": "abc"})

        assert response.status_code == 500
        assert response.json()["message"].startswith("Post validation failed: userId:")

    @pytest.mark.asyncio
    async def test_blank_title_rejected_after_trim(self, test_client, post_payload):
        response = await test_client.post(
            "/posts",
            json={**post_payload, "title": "   ", "userId": str(uuid.uuid4())},
        )

        assert response.status_code == 500
        assert response.json() == {"message": "Post validation failed: title: Title is required"}

    @pytest.mark.asyncio
    async def test_fields_are_trimmed(self, test_client, post_payload):
        response = await test_client.post(
            "/posts",
            json={"title": " Spaced ", "content": "\tbody\n", "userId": str(uuid.uuid4())},
        )

        assert response.json()["title"] == "Spaced"
        assert response.json()["content"] == "body"

    @pytest.mark.asyncio
    async def test_numeric_title_is_stored_as_text(self, test_client):
        response = await test_client.post(
            "/posts",
            json={"title": 2024, "content": 3.0, "userId": str(uuid.uuid4())},
        )

        assert response.status_code == 200
        assert response.json()["title"] == "2024"
        assert response.json()["content"] == "3"

    @pytest.mark.asyncio
    async def test_array_content_is_storage_error(self, test_client, post_payload):
        response = await test_client.post(
            "/posts",
            json={**post_payload, "content": ["a", "b"], "userId": str(uuid.uuid4())},
        )

        assert response.status_code == 500
        assert response.json()["message"].startswith(
            "Post validation failed: content: Cast to string failed"
        )


class TestListAndGetPosts:
    """GET /posts and GET /posts/{id}"""

    @pytest.mark.asyncio
    async def test_list_posts_populates_each_author(self, test_client, make_user, post_payload):
        ada = await make_user()
        grace = await make_user(firstName="Grace", lastName="Hopper", email="grace@example.com")
        await test_client.post("/posts", json={**post_payload, "userId": ada["id"]})
        await test_client.post("/posts", json={**post_payload, "userId": grace["id"]})
        await test_client.post("/posts", json={**post_payload, "userId": str(uuid.uuid4())})

        response = await test_client.get("/posts")

        assert response.status_code == 200
        authors = [post["userId"] for post in response.json()]
        assert len(authors) == 3
        assert author_of(ada) in authors
        assert author_of(grace) in authors
        assert None in authors

    @pytest.mark.asyncio
    async def test_list_posts_empty(self, test_client):
        response = await test_client.get("/posts")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_get_post(self, test_client, make_user, post_payload):
        user = await make_user()
        created = (
            await test_client.post("/posts", json={**post_payload, "userId": user["id"]})
        ).json()

        response = await test_client.get(f"/posts/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    @pytest.mark.asyncio
    async def test_get_unknown_post_is_404(self, test_client):
        response = await test_client.get(f"/posts/{uuid.uuid4()}")

        assert response.status_code == 404
        assert response.json() == {"error": "Post not found"}

    @pytest.mark.asyncio
    async def test_get_malformed_id_is_500(self, test_client):
        response = await test_client.get("/posts/xyz")

        assert response.status_code == 500


class TestUpdatePost:
    """PUT /posts/{id}"""

    @pytest.mark.asyncio
    async def test_update_replaces_fields_and_author(self, test_client, make_user, post_payload):
        ada = await make_user()
        grace = await make_user(firstName="Grace", lastName="Hopper", email="grace@example.com")
        created = (
            await test_client.post("/posts", json={**post_payload, "userId": ada["id"]})
        ).json()

        response = await test_client.put(
            f"/posts/{created['id']}",
            json={"title": "Edited", "content": "New body", "userId": grace["id"], "extra": 1},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == created["id"]
        assert body["title"] == "Edited"
        assert body["content"] == "New body"
        assert body["userId"] == author_of(grace)
        assert body["createdAt"] == created["createdAt"]

    @pytest.mark.asyncio
    async def test_update_missing_field_is_400(self, test_client, make_user, post_payload):
        user = await make_user()
        created = (
            await test_client.post("/posts", json={**post_payload, "userId": user["id"]})
        ).json()

        response = await test_client.put(f"/posts/{created['id']}", json={"title": "Only"})

        assert response.status_code == 400
        assert response.json() == {"error": "title, content, and userId are required"}

    @pytest.mark.asyncio
    async def test_update_unknown_post_is_404(self, test_client, post_payload):
        response = await test_client.put(
            f"/posts/{uuid.uuid4()}",
            json={**post_payload, "userId": str(uuid.uuid4())},
        )

        assert response.status_code == 404
        assert response.json() == {"error": "Post not found"}


class TestDeletePost:
    """DELETE /posts/{id}"""

    @pytest.mark.asyncio
    async def test_delete_twice(self, test_client, post_payload):
        created = (
            await test_client.post("/posts", json={**post_payload, "userId": str(uuid.uuid4())})
        ).json()

        first = await test_client.delete(f"/posts/{created['id']}")
        second = await test_client.delete(f"/posts/{created['id']}")

        assert first.status_code == 200
        assert first.json() == {"message": "Post deleted"}
        assert second.status_code == 404
        assert second.json() == {"error": "Post not found"}

    @pytest.mark.asyncio
    async def test_deleting_author_keeps_post(self, test_client, make_user, post_payload):
        user = await make_user()
        created = (
            await test_client.post("/posts", json={**post_payload, "userId": user["id"]})
        ).json()

        await test_client.delete(f"/users/{user['id']}")
        response = await test_client.get(f"/posts/{created['id']}")

        assert response.status_code == 200
        assert response.json()["userId"] is None
