"""
Tests for the user endpoints and access token gating.
"""

from datetime import datetime, timedelta, timezone

import pytest

from career_api.utils.auth import access_tokens, refresh_tokens

PROTECTED = [
    ("post", "/api/signout"),
    ("get", "/api/user"),
    ("get", "/api/user/profession-results"),
    ("get", "/api/user/progress"),
    ("put", "/api/user/nickname"),
    ("get", "/api/profession-tests"),
    ("post", "/api/profession-tests"),
    ("get", "/api/profession-tests/t1"),
    ("post", "/api/profession-tests/t1/questions"),
    ("post", "/api/profession-tests/t1/results"),
    ("get", "/api/profession_descriptions"),
    ("get", "/api/courses"),
    ("post", "/api/courses"),
    ("get", "/api/courses/c1"),
    ("post", "/api/courses/c1/chapters"),
    ("get", "/api/chapters/ch1/questions"),
    ("post", "/api/chapters/ch1/questions"),
]


class TestAccessGate:
    """Every protected route: 401 without a token, 403 with a bad one."""

    @pytest.mark.parametrize("method, path", PROTECTED)
    def test_missing_token(self, client, backend, method, path):
        res = client.request(method, path)
        assert res.status_code == 401
        assert res.json() == {"error": "Access token is missing"}
        assert not backend.calls

    @pytest.mark.parametrize("method, path", PROTECTED)
    def test_invalid_token(self, client, backend, method, path):
        res = client.request(method, path, headers={"Authorization": "Bearer not-a-token"})
        assert res.status_code == 403
        assert res.json() == {"error": "Invalid or expired token"}
        assert not backend.calls

    def test_expired_token(self, client):
        token = access_tokens.sign("u1", now=datetime.now(timezone.utc) - timedelta(minutes=61))
        res = client.get("/api/user", headers={"Authorization": f"Bearer {token}"})
        assert res.status_code == 403

    def test_refresh_token_is_not_an_access_token(self, client):
        token = refresh_tokens.sign("u1")
        res = client.get("/api/user", headers={"Authorization": f"Bearer {token}"})
        assert res.status_code == 403

    def test_non_bearer_scheme(self, client):
        res = client.get("/api/user", headers={"Authorization": "Basic dXNlcjpwYXNz"})
        assert res.status_code == 401


class TestUser:

    def test_get_user(self, client, backend, auth_headers, user_id):
        backend.add_rows("users", {"id": user_id, "email": "e@x.com", "nickname": "N", "birth_date": "2000-01-01"})
        res = client.get("/api/user", headers=auth_headers)
        assert res.status_code == 200
        assert res.json()["nickname"] == "N"

    def test_get_user_without_profile(self, client, auth_headers):
        res = client.get("/api/user", headers=auth_headers)
        assert res.status_code == 404
        assert res.json() == {"error": "User not found"}

    def test_profession_results_of_caller_only(self, client, backend, auth_headers, user_id):
        backend.add_rows(
            "user_profession_results",
            {"id": "r1", "user_id": user_id, "test_id": "t1", "results": {"engineer": 12}},
            {"id": "r2", "user_id": "someone-else", "test_id": "t1", "results": {"medic": 3}},
        )
        res = client.get("/api/user/profession-results", headers=auth_headers)
        assert res.status_code == 200
        assert [row["id"] for row in res.json()] == ["r1"]

    def test_progress(self, client, backend, auth_headers, user_id):
        backend.add_rows("user_progress", {"id": "p1", "user_id": user_id, "course_id": "c1",
                                           "chapter_id": "ch1", "status": "completed"})
        res = client.get("/api/user/progress", headers=auth_headers)
        assert res.status_code == 200
        assert res.json()[0]["status"] == "completed"

    def test_progress_upstream_failure(self, client, backend, auth_headers):
        backend.fail("select", "user_progress", 'relation "public.user_progress" does not exist')
        res = client.get("/api/user/progress", headers=auth_headers)
        assert res.status_code == 400
        assert res.json() == {"error": 'relation "public.user_progress" does not exist'}

    def test_update_nickname(self, client, backend, auth_headers, user_id):
        backend.add_rows("users", {"id": user_id, "email": "e@x.com", "nickname": "old"})
        res = client.put("/api/user/nickname", headers=auth_headers, json={"nickname": "new"})
        assert res.status_code == 200
        body = res.json()
        assert body["message"] == "Nickname updated successfully"
        assert body["user"]["nickname"] == "new"
        assert backend.tables["users"][0]["nickname"] == "new"

    def test_update_nickname_missing_field(self, client, auth_headers):
        res = client.put("/api/user/nickname", headers=auth_headers, json={})
        assert res.status_code == 400
        assert res.json() == {"error": "nickname is required"}
