from blog.client.create_post_form import CreatePostForm, FormState, SubmitResult  # noqa: F401
