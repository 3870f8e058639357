from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from blog import schemas
from blog.errors import MissingFileError, StorageError
from blog.services.file_storage import FileStorage, get_file_storage
from blog.utils.logger import get_logger

logger = get_logger("upload")

router = APIRouter(
    prefix="/api",
    tags=["Uploads"]
)

# POST: multipart body with a single "file" field
@router.post("/upload", response_model=schemas.UploadResult)
async def upload_file(request: Request, storage: FileStorage = Depends(get_file_storage)):
    try:
        form = await request.form()
        file = form.get("file")
        if not isinstance(file, UploadFile) or not file.filename:
            raise MissingFileError()

        url = await run_in_threadpool(storage.store, file.file, file.filename)
    except MissingFileError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except StorageError as e:
        logger.error(f"Upload error: {e}")
        raise HTTPException(status_code=500, detail=f"Upload failed: {e}")
    except Exception:
        # Malformed multipart bodies and anything else the parser throws
        logger.exception("Unexpected upload error")
        raise HTTPException(status_code=500, detail="Upload failed: unexpected error")

    return schemas.UploadResult(url=url)
