from blog.schemas.post import PostCreate, Post, PostCreated, PostCreateFailed  # noqa: F401
from blog.schemas.upload import UploadResult  # noqa: F401
