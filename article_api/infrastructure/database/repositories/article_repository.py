"""Concrete repository implementation backed by SQLAlchemy."""

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import String, delete, func, literal, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from article_api.application.interfaces import ArticleRepository
from article_api.domain.entities import Article, ArticleStatus
from article_api.domain.exceptions import PersistenceError
from article_api.infrastructure.database.models import ArticleModel


@contextmanager
def _translate_errors(operation: str) -> Iterator[None]:
    """Re-raise SQLAlchemy failures as the domain's PersistenceError."""
    try:
        yield
    except SQLAlchemyError as e:
        raise PersistenceError(operation, e) from e


def _keep_when_empty(value: str | None, column):
    """``COALESCE(NULLIF(:value, ''), column)`` — empty input keeps the stored value."""
    return func.coalesce(func.nullif(literal(value or "", String()), ""), column)


class SQLAlchemyArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port using SQLAlchemy async sessions.

    Mutating methods commit before returning so a failed commit surfaces as
    ``PersistenceError`` while the request is still being answered.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ArticleModel) -> Article:
        """Map ORM model → domain entity."""
        return Article(
            id=model.id,
            title=model.title,
            content=model.content,
            category=model.category,
            status=ArticleStatus(model.status),
        )

    def _to_model(self, entity: Article) -> ArticleModel:
        """Map domain entity → ORM model (for creation)."""
        return ArticleModel(
            title=entity.title,
            content=entity.content,
            category=entity.category,
            status=ArticleStatus(entity.status).value,
        )

    async def get_by_id(self, article_id: int) -> Article | None:
        with _translate_errors("load article"):
            result = await self._session.get(ArticleModel, article_id)
        return self._to_entity(result) if result else None

    async def list_by_status(self, status: str, skip: int = 0, limit: int = 10) -> list[Article]:
        stmt = (
            select(ArticleModel)
            .where(ArticleModel.status == status)
            .order_by(ArticleModel.id)
            .offset(skip)
            .limit(limit)
        )
        with _translate_errors("list articles"):
            result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def count_by_status(self, status: str) -> int:
        stmt = select(func.count()).select_from(ArticleModel).where(ArticleModel.status == status)
        with _translate_errors("count articles"):
            result = await self._session.execute(stmt)
        return result.scalar_one()

    async def create(self, article: Article) -> Article:
        model = self._to_model(article)
        with _translate_errors("insert article"):
            self._session.add(model)
            await self._session.flush()
            await self._session.commit()
        return self._to_entity(model)

    async def update_fields(
        self,
        article_id: int,
        title: str | None = None,
        content: str | None = None,
        category: str | None = None,
        status: ArticleStatus | None = None,
    ) -> bool:
        stmt = (
            update(ArticleModel)
            .where(ArticleModel.id == article_id)
            .values(
                title=_keep_when_empty(title, ArticleModel.title),
                content=_keep_when_empty(content, ArticleModel.content),
                category=_keep_when_empty(category, ArticleModel.category),
                status=_keep_when_empty(
                    ArticleStatus(status).value if status else None, ArticleModel.status
                ),
            )
            .execution_options(synchronize_session=False)
        )
        with _translate_errors("update article"):
            result = await self._session.execute(stmt)
            matched = result.rowcount > 0
            await self._session.commit()
        return matched

    async def delete(self, article_id: int) -> bool:
        stmt = (
            delete(ArticleModel)
            .where(ArticleModel.id == article_id)
            .execution_options(synchronize_session=False)
        )
        with _translate_errors("delete article"):
            result = await self._session.execute(stmt)
            matched = result.rowcount > 0
            await self._session.commit()
        return matched
