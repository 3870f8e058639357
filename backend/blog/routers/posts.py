import os
from typing import Union

from fastapi import APIRouter, Depends, HTTPException

from blog import schemas
from blog.errors import PersistenceError
from blog.repositories.post_repository import PostRepository, get_post_repository
from blog.services.file_storage import FileStorage, get_file_storage
from blog.utils.logger import get_logger

logger = get_logger("posts")

router = APIRouter(
    prefix="/api/posts",
    tags=["Posts"]
)

# POST: create a post. imageUrl is stored as given even when no such upload exists.
@router.post("", response_model=Union[schemas.PostCreated, schemas.PostCreateFailed])
def create_post(
    payload: schemas.PostCreate,
    repo: PostRepository = Depends(get_post_repository),
    storage: FileStorage = Depends(get_file_storage),
):
    if payload.image_url:
        path = storage.path_for(payload.image_url)
        if path is None or not os.path.exists(path):
            logger.warning(f"Post {payload.title!r} references missing upload {payload.image_url!r}")

    try:
        post = repo.create(
            title=payload.title,
            content=payload.content,
            image_url=payload.image_url,
        )
    except PersistenceError as e:
        logger.error(f"Error creating post: {e.__cause__ or e}")
        return schemas.PostCreateFailed(error="Error creating post")

    logger.info(f"Created post {post.id}: {post.title!r}")
    return schemas.PostCreated(post=schemas.Post.model_validate(post))

# GET: a single post by id
@router.get("/{post_id}", response_model=schemas.Post)
def get_post(post_id: int, repo: PostRepository = Depends(get_post_repository)):
    post = repo.find_one(post_id)
    if not post:
        raise HTTPException(status_code=404, detail="Post not found")
    return post
