from .article import (
    VALIDATION_MESSAGES,
    ArticleCreate,
    ArticleCreatedResponse,
    ArticleListResponse,
    ArticleResponse,
    ArticleUpdate,
    validation_messages,
)

__all__ = [
    "VALIDATION_MESSAGES",
    "ArticleCreate",
    "ArticleCreatedResponse",
    "ArticleListResponse",
    "ArticleResponse",
    "ArticleUpdate",
    "validation_messages",
]
