"""Tests for the database row models."""

import uuid
from types import SimpleNamespace

from conftest import T0

from gator.models import Feed, User
from gator.models.base import DBModel


def test_models_validate_from_row_objects():
    row = SimpleNamespace(id=uuid.uuid4(), created_at=T0, updated_at=T0, name="alice")

    user = User.model_validate(row)

    assert user.id == row.id
    assert user.name == "alice"


def test_feed_from_row_object_defaults_optional_fields():
    row = SimpleNamespace(
        id=uuid.uuid4(),
        created_at=T0,
        updated_at=T0,
        name="Blog",
        url="https://blog.example.com/rss",
        user_id=uuid.uuid4(),
    )

    feed = Feed.model_validate(row)

    assert feed.last_fetched_at is None
    assert feed.user_name is None


def test_base_uses_model_config_not_inner_config_class():
    assert DBModel.model_config["from_attributes"] is True
    assert "Config" not in vars(DBModel)
