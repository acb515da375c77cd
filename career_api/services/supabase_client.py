"""
Managed backend client module

Thin HTTP binding to the managed backend that owns every user credential and
every table. Auth calls go to /auth/v1, table reads and writes to /rest/v1.
Failures of any kind surface as UpstreamError carrying the backend's message;
nothing is retried.

@version 1.0.0
"""

import logging
from typing import Any, Dict, List, Optional

import requests

from ..config import settings
from ..utils.errors import UpstreamError

logger = logging.getLogger(__name__)


class SupabaseClient:
    """
    Client for the managed data/auth backend
    """

    def __init__(self, url: str, key: str, timeout: Optional[float] = None,
                 session: Optional[requests.Session] = None):
        """
        SupabaseClient constructor

        @param url backend base URL
        @param key API key sent with every request
        @param timeout per-request timeout in seconds, None for no timeout
        @param session requests session to reuse
        """
        self.url = url.rstrip("/")
        self.key = key
        self.timeout = timeout
        self.session = session or requests.Session()

    # ---- auth -----------------------------------------------------------

    def sign_up(self, email: str, password: str) -> Dict[str, Any]:
        """
        Create an identity.

        @param email user email
        @param password user password
        @returns Dict created user
        """
        data = self._request("POST", "/auth/v1/signup", json={"email": email, "password": password})
        # with auto-confirm the backend answers with a session wrapping the user
        return data.get("user") or data

    def sign_in(self, email: str, password: str) -> Dict[str, Any]:
        """
        Password sign-in.

        @param email user email
        @param password user password
        @returns Dict backend session, including "user"
        """
        return self._request(
            "POST", "/auth/v1/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )

    def sign_out(self, access_token: Optional[str] = None) -> None:
        """
        End a backend session. Without a backend session token there is
        nothing to end and no call is made.

        @param access_token backend session token
        """
        if not access_token:
            logger.debug("sign_out: no backend session token given")
            return
        self._request("POST", "/auth/v1/logout", token=access_token)

    def reset_password_for_email(self, email: str, redirect_to: str) -> None:
        """
        Ask the backend to send a password reset email.

        @param email user email
        @param redirect_to URL the reset link points at
        """
        self._request("POST", "/auth/v1/recover", params={"redirect_to": redirect_to}, json={"email": email})

    def update_user(self, password: str, access_token: Optional[str] = None) -> Dict[str, Any]:
        """
        Set a new password for the user owning the backend session token.

        @param password new password
        @param access_token backend session (recovery) token
        @returns Dict updated user
        """
        return self._request("PUT", "/auth/v1/user", json={"password": password}, token=access_token)

    # ---- tables ---------------------------------------------------------

    def select(self, table: str, columns: str = "*", filters: Optional[Dict[str, Any]] = None,
               order: Optional[str] = None, ascending: bool = True) -> List[Dict[str, Any]]:
        """
        Read rows. Nested resources are embedded through the columns string,
        e.g. "id,question_options(id,option_text)".

        @param table table name
        @param columns select list
        @param filters equality filters, column -> value
        @param order column to sort by
        @param ascending sort direction
        @returns List matching rows
        """
        params = {"select": columns}
        params.update(self._eq(filters))
        if order:
            params["order"] = f"{order}.{'asc' if ascending else 'desc'}"
        return self._request("GET", f"/rest/v1/{table}", params=params)

    def insert(self, table: str, rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        """
        Insert rows and return them as stored.

        @param table table name
        @param rows rows to insert
        @returns List inserted rows
        """
        return self._request(
            "POST", f"/rest/v1/{table}",
            json=rows,
            headers={"Prefer": "return=representation"},
        )

    def update(self, table: str, patch: Dict[str, Any], filters: Dict[str, Any]) -> List[Dict[str, Any]]:
        """
        Update the rows matching filters and return them as stored.

        @param table table name
        @param patch column values to set
        @param filters equality filters, column -> value
        @returns List updated rows
        """
        return self._request(
            "PATCH", f"/rest/v1/{table}",
            params=self._eq(filters),
            json=patch,
            headers={"Prefer": "return=representation"},
        )

    def rpc(self, name: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """
        Call a stored procedure.

        @param name procedure name
        @param params named arguments
        @returns Any procedure result
        """
        return self._request("POST", f"/rest/v1/rpc/{name}", json=params or {})

    # ---- transport ------------------------------------------------------

    @staticmethod
    def _eq(filters: Optional[Dict[str, Any]]) -> Dict[str, str]:
        return {column: f"eq.{value}" for column, value in (filters or {}).items()}

    def _headers(self, token: Optional[str] = None) -> Dict[str, str]:
        return {
            "apikey": self.key,
            "Authorization": f"Bearer {token or self.key}",
            "Content-Type": "application/json",
        }

    def _request(self, method: str, path: str, params: Optional[Dict[str, Any]] = None,
                 json: Any = None, headers: Optional[Dict[str, str]] = None,
                 token: Optional[str] = None) -> Any:
        request_headers = self._headers(token)
        if headers:
            request_headers.update(headers)

        logger.debug(f"{method} {path} params={params}")
        try:
            response = self.session.request(
                method,
                f"{self.url}{path}",
                params=params,
                json=json,
                headers=request_headers,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise UpstreamError(str(e)) from e

        if not response.ok:
            error = self._error_from(response)
            logger.warning(f"{method} {path} returned {response.status_code}: {error.message}")
            raise error

        if not response.content:
            return {}
        try:
            return response.json()
        except ValueError as e:
            raise UpstreamError(f"Invalid JSON from backend: {e}") from e

    @staticmethod
    def _error_from(response: requests.Response) -> UpstreamError:
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            for field in ("message", "msg", "error_description", "error"):
                if body.get(field):
                    return UpstreamError(str(body[field]), response.status_code, body.get("code"))
        return UpstreamError(
            response.text or f"Backend request failed with status {response.status_code}",
            response.status_code,
        )


supabase_client = SupabaseClient(settings.supabase_url, settings.supabase_key, settings.supabase_timeout)


def get_supabase() -> SupabaseClient:
    """
    FastAPI dependency returning the shared backend client.

    @returns SupabaseClient backend client
    """
    return supabase_client
