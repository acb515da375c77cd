"""
Profession test service module

Aptitude tests: their scored multiple-choice questions and the results users
save after taking them. A question embeds its options, and each option its
per-profession scores.

@version 1.0.0
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from .composition import fetch_one, fetch_with_children
from .supabase_client import SupabaseClient
from ..utils.errors import InvalidInputError, UpstreamError

logger = logging.getLogger(__name__)

QUESTION_COLUMNS = (
    "id,question_text,"
    "question_options(id,option_text,option_scores(profession,score))"
)
TEST_NOT_FOUND = "Profession test not found"


class ProfessionTestService:
    """
    Profession test service class
    """

    @staticmethod
    def create_test(client: SupabaseClient, title: str, description: Optional[str] = None) -> Dict[str, Any]:
        """
        @param client backend client
        @param title test title
        @param description test description
        @returns Dict created test
        """
        rows = client.insert("profession_tests", [{"title": title, "description": description}])
        if not rows:
            raise UpstreamError("Insert returned no rows")
        return rows[0]

    @staticmethod
    def list_tests(client: SupabaseClient) -> List[Dict[str, Any]]:
        return client.select("profession_tests")

    @staticmethod
    def list_descriptions(client: SupabaseClient) -> List[Dict[str, Any]]:
        return client.select("profession_descriptions")

    @staticmethod
    def add_question(client: SupabaseClient, test_id: str, question_text: str,
                     options: List[Dict[str, Any]]) -> Any:
        """
        Add a question with its options and scores to an existing test.
        The backend procedure writes the question, options and scores in one call.

        @param client backend client
        @param test_id parent test
        @param question_text question text
        @param options options, each with its text and a profession -> score map
        @returns Any id of the new question
        """
        fetch_one(client, "profession_tests", test_id, TEST_NOT_FOUND, columns="id")

        question_id = client.rpc("add_profession_test_question", {
            "p_test_id": test_id,
            "p_question_text": question_text,
            "p_options": options,
        })
        logger.info(f"Added question {question_id} to profession test {test_id}")
        return question_id

    @staticmethod
    def get_test_with_questions(client: SupabaseClient, test_id: str) -> Dict[str, Any]:
        """
        @param client backend client
        @param test_id test to compose
        @returns Dict test attributes plus "questions"
        """
        return fetch_with_children(
            client,
            parent_table="profession_tests",
            parent_id=test_id,
            child_table="profession_test_questions",
            foreign_key="test_id",
            children_key="questions",
            not_found_message=TEST_NOT_FOUND,
            child_columns=QUESTION_COLUMNS,
        )

    @staticmethod
    def save_results(client: SupabaseClient, user_id: str, test_id: str, results: Any) -> Dict[str, Any]:
        """
        Store a user's scored result for a test.

        @param client backend client
        @param user_id authenticated user
        @param test_id test that was taken
        @param results scored map, stored as given
        @returns Dict stored result row
        """
        if not results:
            raise InvalidInputError("Results are required")

        fetch_one(client, "profession_tests", test_id, TEST_NOT_FOUND, columns="id")

        rows = client.insert("user_profession_results", [{
            "user_id": user_id,
            "test_id": test_id,
            "results": results,
            "created_at": datetime.now(timezone.utc).isoformat(),
        }])
        if not rows:
            raise UpstreamError("Insert returned no rows")
        return rows[0]
