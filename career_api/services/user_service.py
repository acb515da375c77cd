"""
User service module

Profile, test results and course progress of the authenticated user.

@version 1.0.0
"""

import logging
from typing import Any, Dict, List

from .composition import fetch_one
from .supabase_client import SupabaseClient
from ..utils.errors import NotFoundError

logger = logging.getLogger(__name__)


class UserService:
    """
    User service class
    """

    @staticmethod
    def get_user(client: SupabaseClient, user_id: str) -> Dict[str, Any]:
        """
        @param client backend client
        @param user_id authenticated user
        @returns Dict profile row
        """
        logger.debug(f"get_user: {user_id}")
        return fetch_one(client, "users", user_id, "User not found")

    @staticmethod
    def get_profession_results(client: SupabaseClient, user_id: str) -> List[Dict[str, Any]]:
        """
        @param client backend client
        @param user_id authenticated user
        @returns List saved profession test results
        """
        return client.select("user_profession_results", filters={"user_id": user_id})

    @staticmethod
    def get_progress(client: SupabaseClient, user_id: str) -> List[Dict[str, Any]]:
        """
        @param client backend client
        @param user_id authenticated user
        @returns List course progress rows
        """
        return client.select("user_progress", filters={"user_id": user_id})

    @staticmethod
    def update_nickname(client: SupabaseClient, user_id: str, nickname: str) -> Dict[str, Any]:
        """
        @param client backend client
        @param user_id authenticated user
        @param nickname new nickname
        @returns Dict updated profile row
        """
        rows = client.update("users", {"nickname": nickname}, filters={"id": user_id})
        if not rows:
            raise NotFoundError("User not found")
        logger.info(f"Updated nickname of user {user_id}")
        return rows[0]
