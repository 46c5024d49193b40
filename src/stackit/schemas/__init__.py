# src/stackit/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .admin import BulkActionRequest, BulkActionResponse, CreateAdminRequest
from .common import APIModel, Pagination
from .notification import NotificationListResponse, NotificationOut
from .question import AnswerCreate, AnswerOut, QuestionCreate, QuestionOut
from .user import AuthResponse, LoginRequest, RegisterRequest, UserPrivate, UserPublic
from .vote import VoteCreate, VoteResponse

__all__ = [
    "BulkActionRequest", "BulkActionResponse", "CreateAdminRequest",
    "APIModel", "Pagination",
    "NotificationListResponse", "NotificationOut",
    "AnswerCreate", "AnswerOut", "QuestionCreate", "QuestionOut",
    "AuthResponse", "LoginRequest", "RegisterRequest", "UserPrivate", "UserPublic",
    "VoteCreate", "VoteResponse",
]
