"""
Data model package

Pydantic request and response schemas. Rows themselves are owned by the
managed backend and pass through as plain dicts.

@version 1.0.0
"""

from .auth import (
    RegisterRequest, RegisterResponse, LoginRequest, TokenPair, RefreshRequest,
    AccessTokenResponse, ForgotPasswordRequest, ResetPasswordRequest, SignOutRequest,
    MessageResponse,
)
from .user import NicknameUpdate, NicknameUpdateResponse
from .profession_test import (
    ProfessionTestCreate, QuestionOption, QuestionCreate, QuestionCreateResponse,
    ResultsCreate, ResultsCreateResponse,
)
from .course import CourseCreate, ChapterCreate, ChapterQuestionCreate
