"""End-to-end tests for issued tokens across the account lifecycle.

Covers write access after a deletion request, profile updates and refresh
token rotation.
"""

from datetime import datetime, timedelta

from forum.domain.value import AccountId, BoardId, BoardType
from forum.util.scheduler import run_deletion_sweep
from tests.e2e.conftest import PASSWORD, login, register


def comment_body(content: str = "Hello") -> dict:
    return {"boardType": "FREEBOARD", "boardId": 1, "content": content}


def login_pair(client, nickname: str) -> dict:
    response = client.post(
        "/users/login",
        json={"email": f"{nickname}@example.com", "password": PASSWORD},
    )
    assert response.status_code == 200, response.text
    return response.json()["data"]


class TestWritesAfterDeletionRequest:
    """Tokens issued before a deletion request cannot write."""

    def test_comment_after_delete_me_is_refused(self, client, container, board_repo):
        # Arrange
        user = register(client, "grace")
        board_repo.add_board(BoardType.FREEBOARD, BoardId(1), AccountId(user["accountId"]))
        headers = login(client, "grace")
        assert client.post("/comment", headers=headers, json=comment_body()).status_code == 200

        # Act
        client.delete("/users/me", headers=headers)
        pending = client.post("/comment", headers=headers, json=comment_body())
        client.portal.call(
            run_deletion_sweep, container, datetime.now() + timedelta(days=91)
        )
        anonymized = client.post("/comment", headers=headers, json=comment_body())

        # Assert
        assert pending.status_code == 400
        assert pending.json()["code"] == "U101"
        assert anonymized.status_code == 400
        assert anonymized.json()["code"] == "U102"

    def test_like_after_anonymization_is_refused(self, client, container, board_repo):
        user = register(client, "henry")
        board_repo.add_board(BoardType.FREEBOARD, BoardId(1), AccountId(user["accountId"]))
        headers = login(client, "henry")
        client.delete("/users/me", headers=headers)
        client.portal.call(
            run_deletion_sweep, container, datetime.now() + timedelta(days=91)
        )

        response = client.post("/like/POST_FREEBOARD/1", headers=headers)

        assert response.status_code == 400
        assert response.json()["code"] == "U102"

    def test_restored_account_writes_again(self, client, board_repo):
        user = register(client, "iris")
        board_repo.add_board(BoardType.FREEBOARD, BoardId(1), AccountId(user["accountId"]))
        headers = login(client, "iris")
        client.delete("/users/me", headers=headers)
        client.post(
            "/users/restore",
            json={"email": "iris@example.com", "password": PASSWORD},
        )

        response = client.post("/comment", headers=headers, json=comment_body())

        assert response.status_code == 200


class TestUpdateProfile:
    """Tests for PUT /users/me."""

    def test_update_name_and_nickname(self, client):
        register(client, "jack")
        headers = login(client, "jack")

        response = client.put(
            "/users/me",
            headers=headers,
            json={"name": "Jack Black", "nickname": "jackb", "image": "/img/jack.png"},
        )
        me = client.get("/users/me", headers=headers)

        assert response.status_code == 200
        assert response.json()["data"]["nickname"] == "jackb"
        assert me.json()["data"]["name"] == "Jack Black"
        assert me.json()["data"]["nickname"] == "jackb"
        assert me.json()["data"]["image"] == "/img/jack.png"

    def test_blank_fields_keep_current_values(self, client):
        register(client, "kate")
        headers = login(client, "kate")

        response = client.put(
            "/users/me", headers=headers, json={"name": "  ", "nickname": ""}
        )

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Kate"
        assert response.json()["data"]["nickname"] == "kate"

    def test_duplicate_nickname_rejected(self, client):
        register(client, "liam")
        register(client, "mona")
        headers = login(client, "liam")

        response = client.put("/users/me", headers=headers, json={"nickname": "mona"})

        assert response.status_code == 400
        assert response.json()["code"] == "USER002"

    def test_short_nickname_rejected(self, client):
        register(client, "nina")
        headers = login(client, "nina")

        response = client.put("/users/me", headers=headers, json={"nickname": "n"})

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION ERROR"

    def test_pending_account_cannot_update(self, client):
        register(client, "omar")
        headers = login(client, "omar")
        client.delete("/users/me", headers=headers)

        response = client.put("/users/me", headers=headers, json={"name": "Omar II"})

        assert response.status_code == 400
        assert response.json()["code"] == "U101"

    def test_update_requires_authentication(self, client):
        response = client.put("/users/me", json={"name": "Nobody"})

        assert response.status_code == 401


class TestRefreshTokens:
    """Tests for refresh token rotation and revocation."""

    def test_refresh_rotates_the_token(self, client):
        # Arrange
        register(client, "paul")
        issued = login_pair(client, "paul")

        # Act
        first = client.post(
            "/users/refresh", json={"refreshToken": issued["refreshToken"]}
        )
        reused = client.post(
            "/users/refresh", json={"refreshToken": issued["refreshToken"]}
        )

        # Assert
        assert first.status_code == 200
        pair = first.json()["data"]
        assert pair["refreshToken"] != issued["refreshToken"]
        me = client.get("/users/me", headers={"Authorization": f"Bearer {pair['token']}"})
        assert me.json()["data"]["nickname"] == "paul"

        assert reused.status_code == 400
        assert reused.json()["code"] == "U106"

    def test_logout_revokes_refresh_token(self, client):
        register(client, "quinn")
        issued = login_pair(client, "quinn")

        client.post(
            "/users/logout",
            headers={"Authorization": f"Bearer {issued['token']}"},
        )
        response = client.post(
            "/users/refresh", json={"refreshToken": issued["refreshToken"]}
        )

        assert response.status_code == 400
        assert response.json()["code"] == "U106"

    def test_access_token_is_not_a_refresh_token(self, client):
        register(client, "rosa")
        issued = login_pair(client, "rosa")

        response = client.post("/users/refresh", json={"refreshToken": issued["token"]})

        assert response.status_code == 400
        assert response.json()["code"] == "U106"

    def test_refresh_token_is_not_an_access_token(self, client):
        register(client, "sam")
        issued = login_pair(client, "sam")
        client.cookies.clear()

        response = client.get(
            "/users/me",
            headers={"Authorization": f"Bearer {issued['refreshToken']}"},
        )

        assert response.status_code == 401

    def test_deletion_request_revokes_refresh_token(self, client):
        register(client, "tara")
        issued = login_pair(client, "tara")
        client.delete(
            "/users/me", headers={"Authorization": f"Bearer {issued['token']}"}
        )

        response = client.post(
            "/users/refresh", json={"refreshToken": issued["refreshToken"]}
        )

        assert response.status_code == 400
        assert response.json()["code"] == "U101"
