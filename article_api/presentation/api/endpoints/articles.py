"""Article CRUD endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from article_api.application.schemas import (
    ArticleCreate,
    ArticleCreatedResponse,
    ArticleListResponse,
    ArticleResponse,
    ArticleUpdate,
)
from article_api.application.services import ArticleService
from article_api.domain.entities import ArticleStatus
from article_api.domain.exceptions import EntityNotFoundError, PersistenceError
from article_api.infrastructure.dependencies import get_article_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/article", tags=["Articles"])

# Largest value every supported store accepts for an INTEGER id or a LIMIT/OFFSET.
MAX_INT = 2**31 - 1


def _server_error(e: PersistenceError) -> HTTPException:
    logger.exception("Database error: %s", e)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))


@router.get("/", response_model=ArticleListResponse)
async def list_articles(
    limit: int = Query(10, ge=0, le=MAX_INT),
    offset: int = Query(0, ge=0, le=MAX_INT),
    status_filter: str = Query(ArticleStatus.PUBLISH.value, alias="status"),
    service: ArticleService = Depends(get_article_service),
) -> ArticleListResponse:
    """Retrieve one page of articles with the given status and the total match count."""
    try:
        articles, count = await service.list_articles(
            status=status_filter, skip=offset, limit=limit
        )
    except PersistenceError as e:
        raise _server_error(e)
    return ArticleListResponse(
        count=count,
        data=[ArticleResponse.model_validate(a, from_attributes=True) for a in articles],
    )


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: int = Path(ge=-MAX_INT - 1, le=MAX_INT),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID."""
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except PersistenceError as e:
        raise _server_error(e)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.post("/", response_model=ArticleCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleCreatedResponse:
    """Create a new article and return its generated ID."""
    try:
        article = await service.create_article(data)
    except PersistenceError as e:
        raise _server_error(e)
    return ArticleCreatedResponse(id=article.id)


@router.put("/{article_id}", response_model=str)
async def update_article(
    data: ArticleUpdate,
    article_id: int = Path(ge=-MAX_INT - 1, le=MAX_INT),
    service: ArticleService = Depends(get_article_service),
) -> str:
    """Update the non-empty fields of an existing article."""
    try:
        await service.update_article(article_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except PersistenceError as e:
        raise _server_error(e)
    return f"Article {article_id} has been updated"


@router.delete("/{article_id}", response_model=str)
async def delete_article(
    article_id: int = Path(ge=-MAX_INT - 1, le=MAX_INT),
    service: ArticleService = Depends(get_article_service),
) -> str:
    """Delete an article by ID."""
    try:
        await service.delete_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except PersistenceError as e:
        raise _server_error(e)
    return f"Article {article_id} has been deleted"
