"""
Auth service module

Registration, sign-in and password flows. Credentials live in the managed
backend; this service only adds the profile row and mints session tokens.

@version 1.0.0
"""

import logging
from typing import Any, Dict, Optional

from .supabase_client import SupabaseClient
from ..config import settings
from ..models.auth import RegisterRequest
from ..utils.auth import access_tokens, issue_tokens, refresh_tokens
from ..utils.errors import UpstreamError

logger = logging.getLogger(__name__)


class RefreshTokenMissing(Exception):
    """
    Raised when the refresh request carries no token
    """


class AuthService:
    """
    Auth service class
    """

    @staticmethod
    def register(client: SupabaseClient, data: RegisterRequest) -> Dict[str, Any]:
        """
        Create the identity, then the profile row.

        A failed profile insert leaves the identity in place; no compensating
        delete is attempted.

        @param client backend client
        @param data registration fields
        @returns Dict the created identity
        """
        user = client.sign_up(data.email, data.password)
        user_id = user.get("id")
        if not user_id:
            raise UpstreamError("Sign up returned no user id")

        client.insert("users", [{
            "id": user_id,
            "email": data.email,
            "nickname": data.nickname,
            "birth_date": data.birth_date,
        }])
        logger.info(f"Registered user {user_id}")
        return user

    @staticmethod
    def login(client: SupabaseClient, email: str, password: str) -> Dict[str, str]:
        """
        Sign in against the backend and mint an access/refresh pair.

        @param client backend client
        @param email user email
        @param password user password
        @returns Dict accessToken and refreshToken
        """
        session = client.sign_in(email, password)
        user = session.get("user") or {}
        if not user.get("id"):
            raise UpstreamError("Sign in returned no user")
        return issue_tokens(user["id"])

    @staticmethod
    def refresh(refresh_token: Optional[str]) -> Dict[str, str]:
        """
        Mint a new access token from a refresh token. The refresh token is
        neither rotated nor invalidated.

        @param refresh_token refresh token from the caller
        @returns Dict accessToken
        """
        if not refresh_token:
            raise RefreshTokenMissing()
        user_id = refresh_tokens.verify(refresh_token)
        return {"accessToken": access_tokens.sign(user_id)}

    @staticmethod
    def sign_out(client: SupabaseClient, session_token: Optional[str] = None) -> None:
        """
        End the backend session. Issued access and refresh tokens stay valid
        until they expire.

        @param client backend client
        @param session_token backend session token, when the caller has one
        """
        client.sign_out(session_token)

    @staticmethod
    def forgot_password(client: SupabaseClient, email: str) -> None:
        """
        @param client backend client
        @param email user email
        """
        client.reset_password_for_email(email, settings.password_reset_redirect_url)

    @staticmethod
    def reset_password(client: SupabaseClient, new_password: str, recovery_token: Optional[str] = None) -> None:
        """
        @param client backend client
        @param new_password new password
        @param recovery_token backend recovery token from the reset link
        """
        client.update_user(new_password, recovery_token)
