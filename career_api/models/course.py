"""
Course model module

@version 1.0.0
"""

from typing import Any, Optional

from pydantic import BaseModel, Field


class CourseCreate(BaseModel):
    """
    Course creation request
    """
    title: str = Field(..., title="Title")
    description: Optional[str] = Field(None, title="Description")


class ChapterCreate(BaseModel):
    """
    Chapter creation request
    """
    title: str = Field(..., title="Title")
    description: Optional[str] = Field(None, title="Description")
    main_information: Optional[str] = Field(None, title="Main content")
    order_in_course: Optional[int] = Field(None, title="Position in the course")


class ChapterQuestionCreate(BaseModel):
    """
    Chapter question creation request. Both fields are stored as given.
    """
    question: Any = Field(..., title="Question")
    options: Any = Field(..., title="Options")
