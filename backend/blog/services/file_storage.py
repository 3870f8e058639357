"""Local-disk storage for uploaded files.

Files land in a single public directory and are served back as static
assets, so the only thing a caller ever sees is the relative URL.
"""
import hashlib
import os
import time
import uuid
from typing import BinaryIO, Optional

from blog.config import Config
from blog.errors import MissingFileError, StorageError
from blog.utils.logger import get_logger

logger = get_logger("file_storage")


def generate_filename(data: bytes, original_name: str, timestamp_ms: int) -> str:
    """Name for a stored upload: `<timestamp_ms>-<sha256 prefix><original extension>`.

    The digest keeps two different files uploaded in the same millisecond
    from overwriting each other.
    """
    _, ext = os.path.splitext(os.path.basename(original_name))
    digest = hashlib.sha256(data).hexdigest()[:16]
    return f"{timestamp_ms}-{digest}{ext}"


class FileStorage:
    def __init__(self, root: str, url_prefix: str = "/uploads"):
        self.root = root
        self.url_prefix = url_prefix.rstrip("/")

    def store(self, stream: Optional[BinaryIO], original_name: Optional[str]) -> str:
        """Write `stream` under the storage root and return its public URL."""
        if stream is None or not original_name:
            raise MissingFileError()

        try:
            data = stream.read()
        except OSError as e:
            raise StorageError(f"could not read upload: {e.strerror or e}") from e

        name = generate_filename(data, original_name, int(time.time() * 1000))
        target = os.path.join(self.root, name)
        # Write next to the target and rename, so a half-written file is never reachable
        tmp_path = os.path.join(self.root, f".{uuid.uuid4().hex}.part")
        try:
            os.makedirs(self.root, exist_ok=True)
            with open(tmp_path, "wb") as fh:
                fh.write(data)
            os.replace(tmp_path, target)
        except OSError as e:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StorageError(f"could not write file: {e.strerror or e}") from e

        logger.info(f"Stored upload {original_name!r} as {name} ({len(data)} bytes)")
        return f"{self.url_prefix}/{name}"

    def path_for(self, url: str) -> Optional[str]:
        """Disk path behind a URL returned by `store`, or None if it is not one of ours."""
        prefix = f"{self.url_prefix}/"
        if not url or not url.startswith(prefix):
            return None
        name = url[len(prefix):]
        if not name or "/" in name or name.startswith("."):
            return None
        return os.path.join(self.root, name)


def get_file_storage() -> FileStorage:
    return FileStorage(Config.UPLOAD_DIR, Config.UPLOAD_URL_PREFIX)
