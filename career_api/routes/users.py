"""
User route module

Endpoints scoped to the authenticated user: profile, saved profession test
results, course progress and nickname change.

@version 1.0.0
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from ..models.user import NicknameUpdate, NicknameUpdateResponse
from ..services.supabase_client import SupabaseClient, get_supabase
from ..services.user_service import UserService
from ..utils.auth import UserInfo, get_current_user


router = APIRouter(tags=["User"])


@router.get("/user", status_code=status.HTTP_200_OK, response_model=Dict[str, Any], summary="Get user data")
def get_user(
    current_user: UserInfo = Depends(get_current_user),
    client: SupabaseClient = Depends(get_supabase),
):
    """
    @param current_user authenticated caller
    @param client backend client
    @returns dict profile row
    """
    return UserService.get_user(client, current_user.user_id)


@router.get("/user/profession-results", response_model=List[Dict[str, Any]],
            summary="Get user profession test results")
def get_profession_results(
    current_user: UserInfo = Depends(get_current_user),
    client: SupabaseClient = Depends(get_supabase),
):
    return UserService.get_profession_results(client, current_user.user_id)


@router.get("/user/progress", response_model=List[Dict[str, Any]], summary="Get user progress")
def get_progress(
    current_user: UserInfo = Depends(get_current_user),
    client: SupabaseClient = Depends(get_supabase),
):
    return UserService.get_progress(client, current_user.user_id)


@router.put("/user/nickname", response_model=NicknameUpdateResponse, summary="Update user nickname")
def update_nickname(
    data: NicknameUpdate,
    current_user: UserInfo = Depends(get_current_user),
    client: SupabaseClient = Depends(get_supabase),
):
    """
    @param data new nickname
    @param current_user authenticated caller
    @param client backend client
    @returns dict message and the updated profile row
    """
    user = UserService.update_nickname(client, current_user.user_id, data.nickname)
    return {"message": "Nickname updated successfully", "user": user}
