from .article import Article, ArticleStatus

__all__ = [
    "Article",
    "ArticleStatus",
]
