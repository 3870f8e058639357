import os
from dotenv import load_dotenv

# Load .env from the working directory
load_dotenv()


class Config:
    # Database
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./blog.db")
    DATABASE_SSLMODE = os.getenv("DATABASE_SSLMODE")  # e.g. "require" for hosted Postgres

    # Uploaded files are written here and served back under UPLOAD_URL_PREFIX
    UPLOAD_DIR = os.getenv("UPLOAD_DIR", os.path.join("public", "uploads"))
    UPLOAD_URL_PREFIX = os.getenv("UPLOAD_URL_PREFIX", "/uploads")

    # Frontend origins allowed to call the API
    CORS_ORIGINS = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
        if origin.strip()
    ]

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR = os.getenv("LOG_DIR", "logs")

    # Pages
    HOME_POST_LIMIT = int(os.getenv("HOME_POST_LIMIT", "5"))
