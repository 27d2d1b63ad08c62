"""Shared fixtures — an app wired to a throwaway SQLite database."""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from article_api.config import Settings
from article_api.infrastructure.database import Base
from article_api.main import create_app

TITLE = "A twenty char title!"
CONTENT = "Lorem ipsum dolor sit amet. " * 8


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        app_env="test",
        database_url=f"sqlite:///{tmp_path / 'article.db'}",
    )


@pytest.fixture
def article_payload() -> dict:
    return {
        "title": TITLE,
        "content": CONTENT,
        "category": "tech",
        "status": "draft",
    }


@pytest_asyncio.fixture
async def app(settings: Settings):
    app = create_app(settings)
    database = app.state.database
    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield app
    await database.dispose()


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
