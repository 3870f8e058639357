"""Post persistence.

Endpoints and pages receive a PostRepository through FastAPI dependencies,
so tests can swap the session (or the whole repository) without touching
module-level state.
"""
from typing import List, Optional

from fastapi import Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from blog.database import get_db
from blog.errors import PersistenceError
from blog.models import Post
from blog.utils.logger import get_logger

logger = get_logger("post_repository")


class PostRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(self, title: str, content: str, image_url: Optional[str] = None) -> Post:
        """Insert a post; `published` is left at the column default."""
        post = Post(title=title, content=content, image_url=image_url)
        try:
            self.db.add(post)
            self.db.commit()
            self.db.refresh(post)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to insert post {title!r}: {e}")
            raise PersistenceError("Error creating post") from e
        return post

    def find_one(self, post_id: int) -> Optional[Post]:
        try:
            return self.db.query(Post).filter(Post.id == post_id).first()
        except SQLAlchemyError as e:
            logger.error(f"Failed to load post {post_id}: {e}")
            raise PersistenceError("Error loading post") from e

    def find_many(self, published: Optional[bool] = True, limit: Optional[int] = None) -> List[Post]:
        """Posts newest first. `published=None` disables the filter."""
        query = self.db.query(Post)
        if published is not None:
            query = query.filter(Post.published == published)
        query = query.order_by(Post.created_at.desc())
        if limit is not None:
            query = query.limit(limit)
        try:
            return query.all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to list posts: {e}")
            raise PersistenceError("Error loading posts") from e


def get_post_repository(db: Session = Depends(get_db)) -> PostRepository:
    return PostRepository(db)
