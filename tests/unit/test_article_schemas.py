"""Unit tests for article DTO validation and the message table."""

import pytest
from pydantic import ValidationError

from article_api.application.schemas import (
    VALIDATION_MESSAGES,
    ArticleCreate,
    ArticleUpdate,
    validation_messages,
)
from article_api.domain.entities import ArticleStatus

VALID = {
    "title": "t" * 20,
    "content": "c" * 200,
    "category": "abc",
    "status": "publish",
}


def _errors(**overrides) -> list[str]:
    with pytest.raises(ValidationError) as exc_info:
        ArticleCreate(**{**VALID, **overrides})
    return validation_messages(exc_info.value.errors())


def test_create_accepts_minimum_lengths():
    article = ArticleCreate(**VALID)
    assert article.status is ArticleStatus.PUBLISH


@pytest.mark.parametrize(
    "field, value",
    [
        ("title", "t" * 19),
        ("content", "c" * 199),
        ("category", "ab"),
        ("status", "archived"),
    ],
)
def test_create_rejects_single_violation_with_field_message(field, value):
    assert _errors(**{field: value}) == [VALIDATION_MESSAGES[field]]


def test_create_reports_every_failing_field():
    messages = _errors(title="short", category="x")
    assert messages == [VALIDATION_MESSAGES["title"], VALIDATION_MESSAGES["category"]]


def test_create_requires_all_fields():
    with pytest.raises(ValidationError) as exc_info:
        ArticleCreate(title=VALID["title"])
    assert set(validation_messages(exc_info.value.errors())) == {
        VALIDATION_MESSAGES["content"],
        VALIDATION_MESSAGES["category"],
        VALIDATION_MESSAGES["status"],
    }


def test_update_treats_empty_strings_as_unchanged():
    update = ArticleUpdate(title="", content="", category="", status="")
    assert update.model_dump(exclude_none=True) == {}


def test_update_validates_non_empty_fields():
    with pytest.raises(ValidationError) as exc_info:
        ArticleUpdate(title="too short")
    assert validation_messages(exc_info.value.errors()) == [VALIDATION_MESSAGES["title"]]


def test_unmapped_field_falls_back_to_generic_message():
    errors = [{"loc": ("body", "author"), "msg": "Field required", "type": "missing"}]
    assert validation_messages(errors) == ["Field 'author' is invalid: Field required"]


def test_body_level_error_is_reported():
    errors = [{"loc": ("body",), "msg": "Field required", "type": "missing"}]
    assert validation_messages(errors) == ["Request body is invalid: Field required"]
