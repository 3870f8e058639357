import os

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from blog.config import Config
from blog.repositories.post_repository import PostRepository, get_post_repository

templates = Jinja2Templates(directory=os.path.join(os.path.dirname(os.path.dirname(__file__)), "templates"))

router = APIRouter(
    tags=["Pages"],
    default_response_class=HTMLResponse,
)

@router.get("/")
def home(request: Request, repo: PostRepository = Depends(get_post_repository)):
    posts = repo.find_many(published=True, limit=Config.HOME_POST_LIMIT)
    return templates.TemplateResponse(
        request, "index.html", {"posts": posts, "excerpt_length": 100}
    )

@router.get("/posts")
def list_posts(request: Request, repo: PostRepository = Depends(get_post_repository)):
    posts = repo.find_many(published=True)
    return templates.TemplateResponse(
        request, "posts.html", {"posts": posts, "excerpt_length": 80}
    )

# Must be registered before /posts/{post_id}
@router.get("/posts/create-post")
def create_post_page(request: Request):
    return templates.TemplateResponse(request, "create_post.html", {})

@router.get("/posts/{post_id}")
def post_detail(post_id: int, request: Request, repo: PostRepository = Depends(get_post_repository)):
    post = repo.find_one(post_id)
    if not post:
        return templates.TemplateResponse(request, "not_found.html", {}, status_code=404)
    return templates.TemplateResponse(request, "post.html", {"post": post})
