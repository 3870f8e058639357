from datetime import datetime, timezone

import pytest

from blog.errors import PersistenceError
from blog.models import Post
from blog.repositories.post_repository import PostRepository


def _add(session, title, day, published=True):
    post = Post(
        title=title,
        content=f"{title} content",
        published=published,
        created_at=datetime(2024, 1, day, tzinfo=timezone.utc),
    )
    session.add(post)
    session.commit()
    return post


def test_create_uses_store_defaults(db_session):
    post = PostRepository(db_session).create("Hello", "World")

    assert post.id > 0
    assert post.published is False
    assert post.created_at is not None
    assert post.image_url is None


def test_find_one(db_session):
    repo = PostRepository(db_session)
    created = repo.create("Hello", "World", image_url="/uploads/1.png")

    found = repo.find_one(created.id)
    assert (found.title, found.content, found.image_url) == ("Hello", "World", "/uploads/1.png")
    assert repo.find_one(created.id + 100) is None


def test_find_many_returns_published_newest_first(db_session):
    _add(db_session, "old", 1)
    _add(db_session, "draft", 3, published=False)
    _add(db_session, "new", 5)
    _add(db_session, "middle", 2)

    titles = [post.title for post in PostRepository(db_session).find_many()]
    assert titles == ["new", "middle", "old"]


def test_find_many_limit_and_unfiltered(db_session):
    for day in range(1, 8):
        _add(db_session, f"post {day}", day, published=day % 2 == 0)
    repo = PostRepository(db_session)

    assert [p.title for p in repo.find_many(limit=2)] == ["post 6", "post 4"]
    assert len(repo.find_many(published=None)) == 7
    assert [p.title for p in repo.find_many(published=False, limit=1)] == ["post 7"]


def test_create_failure_raises_and_rolls_back(db_session):
    repo = PostRepository(db_session)

    with pytest.raises(PersistenceError):
        repo.create(None, "no title")

    # Session is usable again after the rollback
    assert repo.create("Recovered", "ok").id > 0
