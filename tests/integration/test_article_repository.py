"""Integration tests for the SQLAlchemy article repository against SQLite."""

import pytest
import pytest_asyncio

from article_api.domain.entities import Article, ArticleStatus
from article_api.infrastructure.database import Base, Database
from article_api.infrastructure.database.repositories import SQLAlchemyArticleRepository

CONTENT = "c" * 200


@pytest_asyncio.fixture
async def database(tmp_path):
    database = Database(f"sqlite:///{tmp_path / 'repo.db'}")
    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield database
    await database.dispose()


def _article(status: ArticleStatus = ArticleStatus.DRAFT, title: str = "t" * 20) -> Article:
    return Article(title=title, content=CONTENT, category="tech", status=status)


@pytest.mark.asyncio
async def test_create_assigns_increasing_ids(database: Database):
    async with database.session() as session:
        repo = SQLAlchemyArticleRepository(session)
        first = await repo.create(_article())
        second = await repo.create(_article())

    assert first.id is not None and first.id > 0
    assert second.id > first.id


@pytest.mark.asyncio
async def test_committed_article_is_visible_to_a_new_session(database: Database):
    async with database.session() as session:
        created = await SQLAlchemyArticleRepository(session).create(_article())

    async with database.session() as session:
        loaded = await SQLAlchemyArticleRepository(session).get_by_id(created.id)

    assert loaded == created


@pytest.mark.asyncio
async def test_update_fields_coalesces_empty_values(database: Database):
    async with database.session() as session:
        created = await SQLAlchemyArticleRepository(session).create(_article())

    async with database.session() as session:
        repo = SQLAlchemyArticleRepository(session)
        matched = await repo.update_fields(
            created.id, title="", content=None, category="science", status=ArticleStatus.THRASH
        )

    async with database.session() as session:
        loaded = await SQLAlchemyArticleRepository(session).get_by_id(created.id)

    assert matched is True
    assert loaded.title == created.title
    assert loaded.content == CONTENT
    assert loaded.category == "science"
    assert loaded.status is ArticleStatus.THRASH


@pytest.mark.asyncio
async def test_update_fields_with_no_values_still_matches(database: Database):
    async with database.session() as session:
        repo = SQLAlchemyArticleRepository(session)
        created = await repo.create(_article())
        assert await repo.update_fields(created.id) is True
        assert await repo.update_fields(created.id + 100) is False


@pytest.mark.asyncio
async def test_delete_reports_whether_a_row_was_removed(database: Database):
    async with database.session() as session:
        repo = SQLAlchemyArticleRepository(session)
        created = await repo.create(_article())
        assert await repo.delete(created.id) is True
        assert await repo.delete(created.id) is False
        assert await repo.get_by_id(created.id) is None


@pytest.mark.asyncio
async def test_list_and_count_by_status(database: Database):
    async with database.session() as session:
        repo = SQLAlchemyArticleRepository(session)
        for status in (ArticleStatus.DRAFT, ArticleStatus.PUBLISH, ArticleStatus.DRAFT):
            await repo.create(_article(status))

        drafts = await repo.list_by_status("draft", skip=0, limit=10)
        assert [a.status for a in drafts] == [ArticleStatus.DRAFT, ArticleStatus.DRAFT]
        assert drafts[0].id < drafts[1].id
        assert await repo.count_by_status("draft") == 2
        assert await repo.list_by_status("draft", skip=1, limit=10) == drafts[1:]
        assert await repo.count_by_status("unknown") == 0
