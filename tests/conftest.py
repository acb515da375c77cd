"""
pytest configuration and fixtures.
"""

import copy
import os
import uuid
from typing import Any, Dict, List, Optional

import pytest

os.environ.setdefault("JWT_SECRET", "test-access-secret")
os.environ.setdefault("JWT_REFRESH_SECRET", "test-refresh-secret")
os.environ.setdefault("SUPABASE_URL", "http://backend.test")
os.environ.setdefault("SUPABASE_KEY", "test-key")

from fastapi.testclient import TestClient

from career_api.main import app
from career_api.services.supabase_client import get_supabase
from career_api.utils.auth import access_tokens
from career_api.utils.errors import UpstreamError


class FakeSupabase:
    """In-memory stand-in for the managed backend."""

    def __init__(self):
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.identities: Dict[str, Dict[str, Any]] = {}
        self.calls: List[tuple] = []
        self.failures: Dict[tuple, str] = {}

    # helpers

    def fail(self, operation: str, target: str, message: str):
        """Make the next calls of operation on target raise UpstreamError."""
        self.failures[(operation, target)] = message

    def add_rows(self, table: str, *rows: Dict[str, Any]) -> List[Dict[str, Any]]:
        return self.insert(table, list(rows), record=False)

    def _check(self, operation: str, target: str):
        message = self.failures.get((operation, target))
        if message:
            raise UpstreamError(message)

    # auth

    def sign_up(self, email: str, password: str) -> Dict[str, Any]:
        self.calls.append(("sign_up", email))
        self._check("sign_up", "auth")
        if email in self.identities:
            raise UpstreamError("User already registered")
        user = {"id": str(uuid.uuid4()), "email": email, "aud": "authenticated"}
        self.identities[email] = {"user": user, "password": password}
        return dict(user)

    def sign_in(self, email: str, password: str) -> Dict[str, Any]:
        self.calls.append(("sign_in", email))
        identity = self.identities.get(email)
        if not identity or identity["password"] != password:
            raise UpstreamError("Invalid login credentials")
        return {"access_token": "backend-session", "refresh_token": "backend-refresh", "user": dict(identity["user"])}

    def sign_out(self, access_token: Optional[str] = None) -> None:
        self.calls.append(("sign_out", access_token))
        self._check("sign_out", "auth")

    def reset_password_for_email(self, email: str, redirect_to: str) -> None:
        self.calls.append(("reset_password_for_email", email, redirect_to))
        self._check("reset_password_for_email", "auth")

    def update_user(self, password: str, access_token: Optional[str] = None) -> Dict[str, Any]:
        self.calls.append(("update_user", access_token))
        if not access_token:
            raise UpstreamError("Auth session missing!")
        return {"id": "recovered-user"}

    # tables

    def select(self, table: str, columns: str = "*", filters: Optional[Dict[str, Any]] = None,
               order: Optional[str] = None, ascending: bool = True) -> List[Dict[str, Any]]:
        self.calls.append(("select", table))
        self._check("select", table)
        rows = [row for row in self.tables.get(table, []) if self._matches(row, filters)]
        if order:
            rows = sorted(rows, key=lambda row: row.get(order), reverse=not ascending)
        if columns == "id":
            return [{"id": row["id"]} for row in rows]
        return copy.deepcopy(rows)

    def insert(self, table: str, rows: List[Dict[str, Any]], record: bool = True) -> List[Dict[str, Any]]:
        if record:
            self.calls.append(("insert", table))
            self._check("insert", table)
        stored = []
        for row in rows:
            row = dict(row)
            row.setdefault("id", str(uuid.uuid4()))
            self.tables.setdefault(table, []).append(row)
            stored.append(copy.deepcopy(row))
        return stored

    def update(self, table: str, patch: Dict[str, Any], filters: Dict[str, Any]) -> List[Dict[str, Any]]:
        self.calls.append(("update", table))
        self._check("update", table)
        updated = []
        for row in self.tables.get(table, []):
            if self._matches(row, filters):
                row.update(patch)
                updated.append(copy.deepcopy(row))
        return updated

    def rpc(self, name: str, params: Optional[Dict[str, Any]] = None) -> Any:
        self.calls.append(("rpc", name))
        self._check("rpc", name)
        if name != "add_profession_test_question":
            raise UpstreamError(f"Could not find the function public.{name}")
        question_id = str(uuid.uuid4())
        self.tables.setdefault("profession_test_questions", []).append({
            "id": question_id,
            "test_id": params["p_test_id"],
            "question_text": params["p_question_text"],
            "question_options": [
                {
                    "id": str(uuid.uuid4()),
                    "option_text": option["text"],
                    "option_scores": [
                        {"profession": profession, "score": score}
                        for profession, score in option.get("scores", {}).items()
                    ],
                }
                for option in params["p_options"]
            ],
        })
        return question_id

    @staticmethod
    def _matches(row: Dict[str, Any], filters: Optional[Dict[str, Any]]) -> bool:
        return all(str(row.get(column)) == str(value) for column, value in (filters or {}).items())

    def called(self, operation: str, target: str) -> bool:
        return any(call[0] == operation and call[1] == target for call in self.calls)


@pytest.fixture
def backend() -> FakeSupabase:
    """Fresh in-memory backend."""
    return FakeSupabase()


@pytest.fixture
def client(backend: FakeSupabase):
    """API client wired to the in-memory backend."""
    app.dependency_overrides[get_supabase] = lambda: backend
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def user_id() -> str:
    return "user-123"


@pytest.fixture
def auth_headers(user_id: str) -> Dict[str, str]:
    """Authorization header carrying a valid access token."""
    return {"Authorization": f"Bearer {access_tokens.sign(user_id)}"}
