"""Application service (use case) for Article operations."""

import logging

from article_api.application.interfaces import ArticleRepository
from article_api.application.schemas import ArticleCreate, ArticleUpdate
from article_api.domain.entities import Article, ArticleStatus
from article_api.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ArticleRepository):
        self._repository = repository

    async def get_article(self, article_id: int) -> Article:
        article = await self._repository.get_by_id(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def list_articles(
        self,
        status: str = ArticleStatus.PUBLISH.value,
        skip: int = 0,
        limit: int = 10,
    ) -> tuple[list[Article], int]:
        """Return one page of articles and the total count for the status filter.

        The page and the count are two separate statements; concurrent writes
        between them may make ``count`` disagree with the page contents.
        """
        articles = await self._repository.list_by_status(status, skip=skip, limit=limit)
        count = await self._repository.count_by_status(status)
        return articles, count

    async def create_article(self, data: ArticleCreate) -> Article:
        article = Article(
            title=data.title,
            content=data.content,
            category=data.category,
            status=data.status,
        )
        created = await self._repository.create(article)
        logger.info("Created article %s (status=%s)", created.id, created.status.value)
        return created

    async def update_article(self, article_id: int, data: ArticleUpdate) -> None:
        matched = await self._repository.update_fields(
            article_id,
            title=data.title,
            content=data.content,
            category=data.category,
            status=data.status,
        )
        if not matched:
            raise EntityNotFoundError("Article", article_id)
        logger.info(
            "Updated article %s (fields=%s)",
            article_id,
            sorted(data.model_dump(exclude_none=True)) or "none",
        )

    async def delete_article(self, article_id: int) -> None:
        deleted = await self._repository.delete(article_id)
        if not deleted:
            raise EntityNotFoundError("Article", article_id)
        logger.info("Deleted article %s", article_id)
