"""End-to-end tests for the assistant chat and realtime endpoints."""

from tests.harness import auth_headers, create_client_fixture

client = create_client_fixture()


class TestAssistantChat:
    """End-to-end tests for /api/chat/messages."""

    def test_send_and_list(self, client):
        headers = auth_headers("alice")

        sent = client.post("/api/chat/messages", json={"content": "I can't sleep"}, headers=headers)
        history = client.get("/api/chat/messages", headers=headers).json()

        assert sent.status_code == 200
        body = sent.json()
        assert body["userMessage"]["isFromUser"] is True
        assert body["aiMessage"]["content"] == "Thank you for sharing. You said: I can't sleep"
        assert [m["isFromUser"] for m in history] == [True, False]

    def test_history_is_per_user(self, client):
        client.post("/api/chat/messages", json={"content": "Hi"}, headers=auth_headers("alice"))

        history = client.get("/api/chat/messages", headers=auth_headers("bob")).json()

        assert history == []

    def test_blank_message_rejected(self, client):
        response = client.post(
            "/api/chat/messages", json={"content": "   "}, headers=auth_headers("alice")
        )

        assert response.status_code == 400
        assert response.json() == {"message": "Message content is required"}

    def test_limit_out_of_range(self, client):
        response = client.get(
            "/api/chat/messages", params={"limit": 500}, headers=auth_headers("alice")
        )

        assert response.status_code == 422


class TestRealtimeChat:
    """End-to-end tests for the /ws broadcast."""

    def test_frames_are_rebroadcast(self, client):
        with client.websocket_connect("/ws") as first, client.websocket_connect("/ws") as second:
            first.send_text("not json")
            first.send_json({"type": "chat", "content": "hello", "userId": "u1"})

            for socket in (first, second):
                frame = socket.receive_json()
                assert frame["type"] == "chat_response"
                assert frame["content"] == "hello"
                assert frame["userId"] == "u1"


class TestHealthAndAuth:
    """End-to-end tests for health, current user and analytics."""

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_current_user(self, client):
        response = client.get(
            "/api/auth/user",
            headers=auth_headers("alice", email="alice@example.com", first_name="Alice"),
        )

        assert response.status_code == 200
        assert response.json()["firstName"] == "Alice"

    def test_analytics_requires_authentication(self, client):
        assert client.get("/api/analytics/posts").status_code == 401

    def test_analytics_counts(self, client):
        headers = auth_headers("alice")
        client.post("/api/posts", json={"title": "T", "content": "C"}, headers=headers)

        posts = client.get("/api/analytics/posts", headers=headers).json()
        users = client.get("/api/analytics/users", headers=headers).json()

        assert posts["totalPosts"] == 1
        assert users["totalUsers"] == 1
