from .base import Base
from .session import Database, get_database, get_db_session, to_async_url
from .models import ArticleModel

__all__ = [
    "Base",
    "Database",
    "get_database",
    "get_db_session",
    "to_async_url",
    "ArticleModel",
]
