"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, Field, field_validator

from article_api.domain.entities import ArticleStatus

# Field → message shown to clients when that field fails validation.
VALIDATION_MESSAGES: dict[str, str] = {
    "title": "Title must be between 20 and 255 characters long.",
    "content": "Content must be at least 200 characters long.",
    "category": "Category must be between 3 and 100 characters long.",
    "status": "Status must be one of 'publish', 'draft', or 'thrash'.",
}


class ArticleCreate(BaseModel):
    """Schema for creating a new article — every field is required."""

    title: str = Field(..., min_length=20, max_length=255, examples=["Getting started with FastAPI"])
    content: str = Field(..., min_length=200)
    category: str = Field(..., min_length=3, max_length=100, examples=["tech"])
    status: ArticleStatus = Field(..., examples=[ArticleStatus.DRAFT])


class ArticleUpdate(BaseModel):
    """Schema for updating an existing article — all fields optional.

    An empty string means "leave this field unchanged" and is not validated.
    """

    title: str | None = Field(None, min_length=20, max_length=255)
    content: str | None = Field(None, min_length=200)
    category: str | None = Field(None, min_length=3, max_length=100)
    status: ArticleStatus | None = None

    @field_validator("title", "content", "category", "status", mode="before")
    @classmethod
    def _empty_means_unchanged(cls, value: Any) -> Any:
        if value == "":
            return None
        return value


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    title: str
    content: str
    category: str
    status: ArticleStatus

    model_config = {"from_attributes": True}


class ArticleListResponse(BaseModel):
    """One page of articles plus the total number matching the filter."""

    count: int
    data: list[ArticleResponse]


class ArticleCreatedResponse(BaseModel):
    id: int


def validation_messages(errors: Iterable[Mapping[str, Any]]) -> list[str]:
    """Translate pydantic error dicts into one human-readable message per field.

    Accepts errors from a raw ``ValidationError`` (``loc=("title",)``) as well
    as from FastAPI's ``RequestValidationError`` (``loc=("body", "title")``).
    """
    messages: list[str] = []
    for error in errors:
        loc = [part for part in error.get("loc", ()) if part != "body"]
        if not loc:
            message = f"Request body is invalid: {error.get('msg', 'unknown error')}"
        else:
            field = str(loc[0])
            message = VALIDATION_MESSAGES.get(
                field, f"Field '{field}' is invalid: {error.get('msg', error.get('type'))}"
            )
        if message not in messages:
            messages.append(message)
    return messages
