from datetime import datetime, timezone

from blog.models import Post


def _add(session, title, day, published=True, content=None, image_url=None):
    post = Post(
        title=title,
        content=content or f"{title} content",
        published=published,
        image_url=image_url,
        created_at=datetime(2024, 3, day, tzinfo=timezone.utc),
    )
    session.add(post)
    session.commit()
    return post


def test_home_shows_latest_published_posts(client, db_session):
    for day in range(1, 8):
        _add(db_session, f"Post number {day}", day)
    _add(db_session, "Hidden draft", 9, published=False)

    html = client.get("/").text

    assert "Latest Posts" in html
    assert "Hidden draft" not in html
    assert "Post number 7" in html and "Post number 3" in html
    assert "Post number 2" not in html
    assert html.index("Post number 7") < html.index("Post number 3")


def test_home_excerpt_is_truncated(client, db_session):
    _add(db_session, "Long", 1, content="a" * 150 + "TAIL")

    html = client.get("/").text
    assert "a" * 100 + "..." in html
    assert "TAIL" not in html


def test_posts_page_lists_all_published(client, db_session):
    for day in range(1, 8):
        _add(db_session, f"Entry {day}", day)
    _add(db_session, "Unpublished", 8, published=False)

    html = client.get("/posts").text

    assert "All Posts" in html
    assert all(f"Entry {day}" in html for day in range(1, 8))
    assert "Unpublished" not in html


def test_post_detail_page(client, db_session):
    post = _add(db_session, "With image", 1, content="line one", image_url="/uploads/1-abc.png")

    response = client.get(f"/posts/{post.id}")

    assert response.status_code == 200
    assert "With image" in response.text
    assert 'src="/uploads/1-abc.png"' in response.text
    assert "line one" in response.text


def test_post_detail_without_image(client, db_session):
    post = _add(db_session, "Plain", 1)
    assert "<img" not in client.get(f"/posts/{post.id}").text


def test_missing_post_page(client):
    response = client.get("/posts/12345")
    assert response.status_code == 404
    assert "Post not found" in response.text


def test_create_post_page_has_form(client):
    html = client.get("/posts/create-post").text
    assert 'id="create-post-form"' in html
    assert 'type="file"' in html
    assert "/api/upload" in html and "/api/posts" in html


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_pages_carry_site_header(client):
    html = client.get("/posts").text
    assert "<title>All Posts</title>" in html
    assert "<strong>Postify</strong>" in html
