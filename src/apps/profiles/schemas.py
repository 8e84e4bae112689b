"""
Profile API schemas.
"""

from datetime import datetime
from uuid import UUID

from ninja import Schema

from src.common.pagination import PaginatedResponse


class ProfileSchema(Schema):
    id: UUID
    filename: str
    url: str
    size: int | None = None
    created_at: datetime


class ProfileListSchema(PaginatedResponse):
    results: list[ProfileSchema]


class StorageInfoSchema(Schema):
    static_url: str
    static_root: str
    media_url: str
    media_root: str
    staticfiles_storage: str
    default_storage: str
    serve_media: bool


class MessageSchema(Schema):
    message: str


class ErrorSchema(Schema):
    detail: str
