"""
Authentication utility module

Issues and verifies the session tokens layered over the managed backend's own
sign-in. Two independent signing contexts exist: access tokens (secret A,
short lifetime) and refresh tokens (secret B, long lifetime). Tokens carry only
the userId claim and are never stored, so signing out does not revoke them;
they stay valid until they expire.

@version 1.0.0
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional

from fastapi import HTTPException, Security, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from pydantic import BaseModel

from ..config import settings

logger = logging.getLogger(__name__)

# auto_error is off so a missing header yields 401 instead of FastAPI's 403
security = HTTPBearer(auto_error=False)


class InvalidTokenError(Exception):
    """
    Raised when a token fails the signature or expiry check
    """


class TokenSigner:
    """
    One signing context: a secret and a lifetime.
    """

    def __init__(self, secret: str, lifetime: timedelta, algorithm: str = "HS256"):
        """
        TokenSigner constructor

        @param secret signing secret
        @param lifetime validity window of minted tokens
        @param algorithm JWT signing algorithm
        """
        self.secret = secret
        self.lifetime = lifetime
        self.algorithm = algorithm

    def sign(self, user_id: str, now: Optional[datetime] = None) -> str:
        """
        Mint a token for the given user.

        @param user_id identifier placed in the userId claim
        @param now issue time; defaults to the current UTC time
        @returns str encoded token
        """
        issued_at = now or datetime.now(timezone.utc)
        claims = {
            "userId": user_id,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self.lifetime).timestamp()),
        }
        return jwt.encode(claims, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        """
        Check signature and expiry and return the userId claim.

        @param token encoded token
        @returns str userId
        """
        try:
            payload: Dict = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except JWTError as e:
            raise InvalidTokenError(str(e)) from e

        user_id = payload.get("userId")
        if not user_id:
            raise InvalidTokenError("Token has no userId claim")
        return user_id


access_tokens = TokenSigner(
    settings.jwt_secret,
    timedelta(minutes=settings.access_token_expire_minutes),
    settings.jwt_algorithm,
)
refresh_tokens = TokenSigner(
    settings.jwt_refresh_secret,
    timedelta(days=settings.refresh_token_expire_days),
    settings.jwt_algorithm,
)


def issue_tokens(user_id: str) -> Dict[str, str]:
    """
    Mint an access/refresh pair for one authenticated session.

    @param user_id authenticated user
    @returns Dict accessToken and refreshToken
    """
    return {
        "accessToken": access_tokens.sign(user_id),
        "refreshToken": refresh_tokens.sign(user_id),
    }


class UserInfo(BaseModel):
    """
    Caller identity taken from a verified access token
    """
    user_id: str


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Security(security),
) -> UserInfo:
    """
    FastAPI dependency guarding protected routes.

    @param credentials bearer credentials from the Authorization header
    @returns UserInfo authenticated caller
    """
    if credentials is None or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token is missing",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        user_id = access_tokens.verify(credentials.credentials)
    except InvalidTokenError as e:
        logger.info(f"Rejected access token: {e}")
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return UserInfo(user_id=user_id)
