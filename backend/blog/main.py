import os

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from blog.config import Config
from blog.database import engine, Base
from blog import models  # noqa: F401  (registers tables on Base)
from blog.routers import pages, posts, upload
from blog.utils.logger import get_logger

logger = get_logger("main")

# 1. Create Database Tables (If they don't exist)
Base.metadata.create_all(bind=engine)

# 2. Initialize App
app = FastAPI(title="Blog Backend")

# 3. CORS Configuration (Allow the frontend origin(s))
app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# 4. Error responses are always {"error": "<message>"}
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: HTTPException):
    if exc.status_code == 405:
        message = f"Method '{request.method}' Not Allowed"
    else:
        message = exc.detail
    return JSONResponse(status_code=exc.status_code, content={"error": message}, headers=exc.headers)

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    problems = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err.get("loc", ()) if part != "body")
        problems.append(f"{field}: {err.get('msg')}" if field else err.get("msg"))
    logger.warning(f"Rejected request to {request.url.path}: {problems}")
    return JSONResponse(status_code=400, content={"error": "Invalid request: " + "; ".join(problems)})

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"error": "Internal server error"})

# 5. Register Routers
app.include_router(upload.router)
app.include_router(posts.router)
app.include_router(pages.router)

# 6. Uploaded files are public static assets
os.makedirs(Config.UPLOAD_DIR, exist_ok=True)
app.mount(Config.UPLOAD_URL_PREFIX, StaticFiles(directory=Config.UPLOAD_DIR), name="uploads")

@app.get("/health")
def health():
    return {"status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
