"""
Course service module

Courses, their ordered chapters, and the questions attached to chapters.

@version 1.0.0
"""

import json
import logging
from typing import Any, Dict, List, Optional

from .composition import fetch_one, fetch_with_children
from .supabase_client import SupabaseClient
from ..utils.errors import UpstreamError

logger = logging.getLogger(__name__)

COURSE_NOT_FOUND = "Course not found"
CHAPTER_NOT_FOUND = "Chapter not found"


def _first(rows: List[Dict[str, Any]]) -> Dict[str, Any]:
    if not rows:
        raise UpstreamError("Insert returned no rows")
    return rows[0]


class CourseService:
    """
    Course service class
    """

    @staticmethod
    def create_course(client: SupabaseClient, title: str, description: Optional[str] = None) -> Dict[str, Any]:
        """
        @param client backend client
        @param title course title
        @param description course description
        @returns Dict created course
        """
        return _first(client.insert("courses", [{"title": title, "description": description}]))

    @staticmethod
    def list_courses(client: SupabaseClient) -> List[Dict[str, Any]]:
        return client.select("courses")

    @staticmethod
    def create_chapter(client: SupabaseClient, course_id: str, chapter: Dict[str, Any]) -> Dict[str, Any]:
        """
        Add a chapter to an existing course.

        @param client backend client
        @param course_id parent course
        @param chapter title, description, main_information, order_in_course
        @returns Dict created chapter
        """
        fetch_one(client, "courses", course_id, COURSE_NOT_FOUND, columns="id")
        row = _first(client.insert("chapters", [{"course_id": course_id, **chapter}]))
        logger.info(f"Added chapter {row.get('id')} to course {course_id}")
        return row

    @staticmethod
    def get_course_with_chapters(client: SupabaseClient, course_id: str) -> Dict[str, Any]:
        """
        @param client backend client
        @param course_id course to compose
        @returns Dict course attributes plus "chapters" in course order
        """
        return fetch_with_children(
            client,
            parent_table="courses",
            parent_id=course_id,
            child_table="chapters",
            foreign_key="course_id",
            children_key="chapters",
            not_found_message=COURSE_NOT_FOUND,
            order_by="order_in_course",
        )

    @staticmethod
    def create_chapter_question(client: SupabaseClient, chapter_id: str, question: Any, options: Any) -> Dict[str, Any]:
        """
        Attach a question to an existing chapter. Question and options are
        opaque to this service and stored JSON-encoded.

        @param client backend client
        @param chapter_id parent chapter
        @param question question payload
        @param options options payload
        @returns Dict created row
        """
        fetch_one(client, "chapters", chapter_id, CHAPTER_NOT_FOUND, columns="id")
        return _first(client.insert("chapter_tests", [{
            "chapter_id": chapter_id,
            "question": json.dumps(question),
            "options": json.dumps(options),
        }]))

    @staticmethod
    def get_chapter_questions(client: SupabaseClient, chapter_id: str) -> List[Dict[str, Any]]:
        """
        @param client backend client
        @param chapter_id chapter
        @returns List question rows of the chapter
        """
        return client.select("chapter_tests", filters={"chapter_id": chapter_id}, order="id")
