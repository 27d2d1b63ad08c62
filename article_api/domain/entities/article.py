"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass
from enum import Enum


class ArticleStatus(str, Enum):
    """Moderation status controlling whether an article is visible."""

    PUBLISH = "publish"
    DRAFT = "draft"
    THRASH = "thrash"


@dataclass
class Article:
    """Core domain entity representing an article."""

    title: str
    content: str
    category: str
    status: ArticleStatus
    id: int | None = None

