"""
Auth route module

Registration, sign-in, token refresh, sign-out and the password reset flow.
Only /signout requires an access token.

@version 1.0.0
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status

from ..models.auth import (
    RegisterRequest, RegisterResponse, LoginRequest, TokenPair, RefreshRequest,
    AccessTokenResponse, ForgotPasswordRequest, ResetPasswordRequest, SignOutRequest,
    MessageResponse,
)
from ..services.auth_service import AuthService, RefreshTokenMissing
from ..services.supabase_client import SupabaseClient, get_supabase
from ..utils.auth import InvalidTokenError, UserInfo, get_current_user

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Auth"])


@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=RegisterResponse,
             summary="Register a new user")
def register(data: RegisterRequest, client: SupabaseClient = Depends(get_supabase)):
    """
    Create the identity in the managed backend and the matching profile row.

    @param data registration fields
    @param client backend client
    @returns dict message and the created identity
    """
    user = AuthService.register(client, data)
    return {"message": "User registered successfully", "user": user}


@router.post("/login", response_model=TokenPair, summary="Login a user")
def login(data: LoginRequest, client: SupabaseClient = Depends(get_supabase)):
    """
    @param data credentials
    @param client backend client
    @returns dict accessToken and refreshToken
    """
    return AuthService.login(client, data.email, data.password)


@router.post("/refresh-token", response_model=AccessTokenResponse, summary="Refresh access token")
def refresh_token(data: Optional[RefreshRequest] = None):
    """
    Mint a new access token. 401 when no refresh token is sent, 403 when it
    is invalid or expired.

    @param data refresh token
    @returns dict accessToken
    """
    try:
        return AuthService.refresh(data.refreshToken if data else None)
    except RefreshTokenMissing:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Refresh token is missing")
    except InvalidTokenError as e:
        logger.info(f"Rejected refresh token: {e}")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid or expired refresh token")


@router.post("/signout", response_model=MessageResponse, summary="Sign out a user")
def signout(
    data: Optional[SignOutRequest] = None,
    current_user: UserInfo = Depends(get_current_user),
    client: SupabaseClient = Depends(get_supabase),
):
    """
    End the backend session. Access and refresh tokens already issued are
    not revoked and remain valid until they expire.

    @param data optional backend session token
    @param current_user authenticated caller
    @param client backend client
    @returns dict message
    """
    AuthService.sign_out(client, data.access_token if data else None)
    logger.info(f"User {current_user.user_id} signed out")
    return {"message": "Sign out successful"}


@router.post("/forgot-password", response_model=MessageResponse, summary="Request password reset")
def forgot_password(data: ForgotPasswordRequest, client: SupabaseClient = Depends(get_supabase)):
    AuthService.forgot_password(client, data.email)
    return {"message": "Password reset email sent successfully"}


@router.post("/reset-password", response_model=MessageResponse, summary="Reset user password")
def reset_password(data: ResetPasswordRequest, client: SupabaseClient = Depends(get_supabase)):
    """
    @param data new password and the recovery token from the reset link
    @param client backend client
    @returns dict message
    """
    AuthService.reset_password(client, data.new_password, data.access_token)
    return {"message": "Password updated successfully"}
