from blog.models.post import Post  # noqa: F401
