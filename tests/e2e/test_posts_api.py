"""End-to-end tests for post, comment and tag endpoints."""

from tests.harness import auth_headers, create_client_fixture

client = create_client_fixture()


class TestPosts:
    """End-to-end tests for /api/posts."""

    def test_create_and_fetch(self, client):
        # Act
        created = client.post(
            "/api/posts",
            json={
                "title": "Sleep tips",
                "content": "What helps you fall asleep?",
                "tags": ["sleep", "insomnia"],
            },
            headers=auth_headers("alice", first_name="Alice"),
        )

        # Assert
        assert created.status_code == 200
        body = created.json()
        assert body["authorId"] == "alice"
        assert body["commentCount"] == 0
        assert sorted(t["name"] for t in body["tags"]) == ["insomnia", "sleep"]

        fetched = client.get(f"/api/posts/{body['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["title"] == "Sleep tips"

    def test_create_requires_authentication(self, client):
        response = client.post("/api/posts", json={"title": "T", "content": "C"})

        assert response.status_code == 401

    def test_flagged_post_rejected(self, client):
        response = client.post(
            "/api/posts",
            json={"title": "T", "content": "[flagged] content"},
            headers=auth_headers("alice"),
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Content violates community guidelines"}
        assert client.get("/api/posts").json() == []

    def test_overlong_tag_rejected(self, client):
        response = client.post(
            "/api/posts",
            json={"title": "T", "content": "C", "tags": ["sleep", "x" * 51]},
            headers=auth_headers("alice"),
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Tag names must be 1-50 characters"}
        assert client.get("/api/posts").json() == []
        assert client.get("/api/tags").json() == []

    def test_list_page_size_bounded(self, client):
        too_large = client.get("/api/posts", params={"limit": 500})
        too_small = client.get("/api/posts", params={"limit": 0})

        assert too_large.status_code == 422
        assert "limit" in too_large.json()["message"]
        assert too_small.status_code == 422

    def test_list_offset_not_negative(self, client):
        response = client.get("/api/posts", params={"offset": -1})

        assert response.status_code == 422
        assert "offset" in response.json()["message"]

    def test_list_pages(self, client):
        for title in ("First", "Second", "Third"):
            client.post(
                "/api/posts",
                json={"title": title, "content": "C"},
                headers=auth_headers("alice"),
            )

        page = client.get("/api/posts", params={"limit": 1, "offset": 1}).json()

        assert [p["title"] for p in page] == ["Second"]

    def test_anonymous_author_hidden_from_others(self, client):
        headers = auth_headers("alice")
        client.post(
            "/api/posts",
            json={"title": "Private", "content": "Body", "isAnonymous": True},
            headers=headers,
        )

        public = client.get("/api/posts").json()
        mine = client.get("/api/posts/my", headers=headers).json()

        assert public[0]["authorId"] is None
        assert public[0]["isAnonymous"] is True
        assert mine[0]["authorId"] == "alice"

    def test_search(self, client):
        headers = auth_headers("alice")
        client.post("/api/posts", json={"title": "Panic attacks", "content": "Help"}, headers=headers)
        client.post("/api/posts", json={"title": "Gardening", "content": "Calm"}, headers=headers)

        found = client.get("/api/posts/search", params={"q": "PANIC"})
        missing_query = client.get("/api/posts/search")

        assert [p["title"] for p in found.json()] == ["Panic attacks"]
        assert missing_query.status_code == 400
        assert missing_query.json() == {"message": "Search query required"}

    def test_delete_only_by_author(self, client):
        created = client.post(
            "/api/posts",
            json={"title": "Mine", "content": "Body"},
            headers=auth_headers("alice"),
        ).json()

        forbidden = client.delete(f"/api/posts/{created['id']}", headers=auth_headers("bob"))
        deleted = client.delete(f"/api/posts/{created['id']}", headers=auth_headers("alice"))

        assert forbidden.status_code == 403
        assert deleted.json() == {"message": "Post deleted successfully"}
        assert client.get(f"/api/posts/{created['id']}").status_code == 404

    def test_suggestions(self, client):
        response = client.post("/api/posts/suggestions", json={"tags": ["stress"]})

        assert response.status_code == 200
        assert response.json() == {"suggestions": ["Living with stress"]}


class TestCommentsAndTags:
    """End-to-end tests for comments and tags."""

    def test_comment_increments_count(self, client):
        post = client.post(
            "/api/posts",
            json={"title": "T", "content": "C", "tags": ["anxiety"]},
            headers=auth_headers("alice"),
        ).json()

        comment = client.post(
            f"/api/posts/{post['id']}/comments",
            json={"content": "You are not alone"},
            headers=auth_headers("bob"),
        )
        comments = client.get(f"/api/posts/{post['id']}/comments").json()

        assert comment.status_code == 200
        assert comment.json()["authorId"] == "bob"
        assert [c["content"] for c in comments] == ["You are not alone"]
        assert client.get(f"/api/posts/{post['id']}").json()["commentCount"] == 1

    def test_comment_on_missing_post(self, client):
        response = client.post(
            "/api/posts/123/comments",
            json={"content": "Hello"},
            headers=auth_headers("bob"),
        )

        assert response.status_code == 404

    def test_tags_listed(self, client):
        client.post(
            "/api/posts",
            json={"title": "T", "content": "C", "tags": ["sleep", "anxiety"]},
            headers=auth_headers("alice"),
        )

        tags = client.get("/api/tags").json()

        assert [t["name"] for t in tags] == ["anxiety", "sleep"]
