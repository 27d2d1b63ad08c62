"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from article_api.domain.entities import Article, ArticleStatus


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer.

    Implementations raise ``PersistenceError`` when the store fails.
    """

    @abstractmethod
    async def get_by_id(self, article_id: int) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def list_by_status(self, status: str, skip: int = 0, limit: int = 10) -> list[Article]:
        """Retrieve one page of articles with the given status, ordered by ID."""
        ...

    @abstractmethod
    async def count_by_status(self, status: str) -> int:
        """Count all articles with the given status."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article and return it with the generated ID."""
        ...

    @abstractmethod
    async def update_fields(
        self,
        article_id: int,
        title: str | None = None,
        content: str | None = None,
        category: str | None = None,
        status: ArticleStatus | None = None,
    ) -> bool:
        """Overwrite the non-empty fields of an article.

        Returns True if a row matched the ID, False otherwise.
        """
        ...

    @abstractmethod
    async def delete(self, article_id: int) -> bool:
        """Delete an article. Returns True if deleted, False if not found."""
        ...
