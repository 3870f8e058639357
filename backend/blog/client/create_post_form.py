"""Two-phase post submission: upload the image (if any), then create the post.

The post request is only sent once the upload has resolved with a URL. A
failed upload ends the submit without touching /api/posts, so the caller
never sees a success for a post whose image is missing.

Note: if the upload succeeds and post creation then fails, the uploaded
file stays on disk with no post pointing at it.
"""
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, BinaryIO, Dict, Optional, Tuple, Union

import httpx

from blog.errors import FormBusyError, InvalidPostError, PersistenceError, UploadError
from blog.utils.logger import get_logger

logger = get_logger("create_post_form")

ImageInput = Tuple[str, Union[bytes, BinaryIO]]


class FormState(str, Enum):
    IDLE = "idle"
    UPLOADING = "uploading"
    POST_CREATING = "post_creating"
    DONE = "done"


@dataclass
class SubmitResult:
    success: bool
    message: str
    post: Optional[Dict[str, Any]] = None
    image_url: Optional[str] = None


class CreatePostForm:
    def __init__(self, client: httpx.Client, upload_path: str = "/api/upload", posts_path: str = "/api/posts"):
        self.client = client
        self.upload_path = upload_path
        self.posts_path = posts_path
        self.state = FormState.IDLE
        self.last_result: Optional[SubmitResult] = None
        self._lock = threading.Lock()

    @property
    def is_submitting(self) -> bool:
        return self.state in (FormState.UPLOADING, FormState.POST_CREATING)

    def submit(self, title: str, content: str, image: Optional[ImageInput] = None) -> SubmitResult:
        if not self._lock.acquire(blocking=False):
            raise FormBusyError(f"Form is busy ({self.state.value})")
        try:
            self.last_result = self._run(title, content, image)
            return self.last_result
        finally:
            self.state = FormState.DONE
            self._lock.release()

    def _run(self, title: str, content: str, image: Optional[ImageInput]) -> SubmitResult:
        image_url = None
        try:
            if image is not None:
                self.state = FormState.UPLOADING
                image_url = self._upload(image)

            self.state = FormState.POST_CREATING
            post = self._create_post(title, content, image_url)
        except UploadError as e:
            logger.warning(f"Upload failed, post not created: {e}")
            return SubmitResult(success=False, message=str(e))
        except InvalidPostError as e:
            logger.warning(f"Post rejected: {e}")
            return SubmitResult(success=False, message=str(e), image_url=image_url)
        except PersistenceError as e:
            logger.warning(f"Post creation failed: {e}")
            return SubmitResult(success=False, message=str(e), image_url=image_url)
        except httpx.HTTPError as e:
            logger.error(f"Request failed during {self.state.value}: {e}")
            return SubmitResult(success=False, message="Network error", image_url=image_url)

        return SubmitResult(success=True, message="Post created successfully!", post=post, image_url=image_url)

    def _upload(self, image: ImageInput) -> str:
        filename, body = image
        res = self.client.post(self.upload_path, files={"file": (filename, body)})
        data = _json_or_empty(res)
        if res.status_code != 200 or not data.get("url"):
            raise UploadError(data.get("error") or f"Upload failed with status {res.status_code}")
        return data["url"]

    def _create_post(self, title: str, content: str, image_url: Optional[str]) -> Dict[str, Any]:
        res = self.client.post(
            self.posts_path,
            json={"title": title, "content": content, "imageUrl": image_url},
        )
        data = _json_or_empty(res)
        if 400 <= res.status_code < 500:
            raise InvalidPostError(data.get("error") or f"Post rejected with status {res.status_code}")
        if not data.get("success"):
            raise PersistenceError(data.get("error") or "Error creating post")
        return data["post"]


def _json_or_empty(res: httpx.Response) -> Dict[str, Any]:
    try:
        data = res.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}
