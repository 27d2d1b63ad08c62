"""SQLAlchemy ORM model for the Article entity."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from article_api.infrastructure.database.base import Base


class ArticleModel(Base):
    """ORM model — maps to the 'article' table."""

    __tablename__ = "article"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    status: Mapped[str] = mapped_column(String(10), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<ArticleModel(id={self.id}, title='{self.title}', status='{self.status}')>"
