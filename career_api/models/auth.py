"""
Auth model module

Request and response schemas for registration, sign-in and the password flows.

@version 1.0.0
"""

from typing import Any, Dict, Optional

from pydantic import AliasChoices, BaseModel, Field


class RegisterRequest(BaseModel):
    """
    Registration request
    """
    email: str = Field(..., title="Email")
    password: str = Field(..., title="Password")
    nickname: str = Field(..., title="Nickname")
    birth_date: str = Field(
        ...,
        title="Birth date",
        description="ISO date, e.g. 2000-01-01",
        validation_alias=AliasChoices("birth_date", "birthDate"),
    )


class RegisterResponse(BaseModel):
    message: str
    user: Dict[str, Any]


class LoginRequest(BaseModel):
    """
    Sign-in request
    """
    email: str = Field(..., title="Email")
    password: str = Field(..., title="Password")


class TokenPair(BaseModel):
    """
    Access and refresh tokens of one session
    """
    accessToken: str = Field(..., title="Access token", description="Valid for 1 hour")
    refreshToken: str = Field(..., title="Refresh token", description="Valid for 7 days")


class RefreshRequest(BaseModel):
    """
    Refresh request. A missing token is answered with 401, not 400.
    """
    refreshToken: Optional[str] = Field(None, title="Refresh token")


class AccessTokenResponse(BaseModel):
    accessToken: str = Field(..., title="Access token")


class ForgotPasswordRequest(BaseModel):
    email: str = Field(..., title="Email")


class ResetPasswordRequest(BaseModel):
    """
    Password reset request
    """
    new_password: str = Field(..., title="New password")
    access_token: Optional[str] = Field(
        None,
        title="Recovery token",
        description="Backend session token delivered by the reset email link",
    )


class SignOutRequest(BaseModel):
    access_token: Optional[str] = Field(None, title="Backend session token")


class MessageResponse(BaseModel):
    message: str
