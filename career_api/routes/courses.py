"""
Course route module

Courses, chapters and chapter questions. Every endpoint requires an access
token.

@version 1.0.0
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from ..models.course import CourseCreate, ChapterCreate, ChapterQuestionCreate
from ..services.course_service import CourseService
from ..services.supabase_client import SupabaseClient, get_supabase
from ..utils.auth import get_current_user

router = APIRouter(tags=["Courses"], dependencies=[Depends(get_current_user)])


@router.post("/courses", status_code=status.HTTP_201_CREATED, response_model=Dict[str, Any],
             summary="Create a new course")
def create_course(data: CourseCreate, client: SupabaseClient = Depends(get_supabase)):
    return CourseService.create_course(client, data.title, data.description)


@router.get("/courses", response_model=List[Dict[str, Any]], summary="Get all courses")
def get_all_courses(client: SupabaseClient = Depends(get_supabase)):
    return CourseService.list_courses(client)


@router.get("/courses/{course_id}", response_model=Dict[str, Any],
            summary="Get a specific course with its chapters")
def get_course_with_chapters(course_id: str, client: SupabaseClient = Depends(get_supabase)):
    """
    @param course_id course id
    @param client backend client
    @returns dict course attributes plus "chapters" ordered by order_in_course
    """
    return CourseService.get_course_with_chapters(client, course_id)


@router.post("/courses/{course_id}/chapters", status_code=status.HTTP_201_CREATED, response_model=Dict[str, Any],
             summary="Create a new chapter for a course")
def create_chapter(course_id: str, data: ChapterCreate, client: SupabaseClient = Depends(get_supabase)):
    return CourseService.create_chapter(client, course_id, data.model_dump(exclude_none=True))


@router.post("/chapters/{chapter_id}/questions", status_code=status.HTTP_201_CREATED,
             response_model=Dict[str, Any], summary="Create questions for a chapter")
def create_chapter_questions(chapter_id: str, data: ChapterQuestionCreate,
                             client: SupabaseClient = Depends(get_supabase)):
    return CourseService.create_chapter_question(client, chapter_id, data.question, data.options)


@router.get("/chapters/{chapter_id}/questions", response_model=List[Dict[str, Any]],
            summary="Get questions for a specific chapter")
def get_chapter_questions(chapter_id: str, client: SupabaseClient = Depends(get_supabase)):
    return CourseService.get_chapter_questions(client, chapter_id)
