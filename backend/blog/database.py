from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from blog.config import Config


def _connect_args(url: str) -> dict:
    # SQLite connections are shared across FastAPI's threadpool workers
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    if Config.DATABASE_SSLMODE:
        return {"sslmode": Config.DATABASE_SSLMODE}
    return {}


engine = create_engine(
    Config.DATABASE_URL,
    # Check if connection is alive before using it
    pool_pre_ping=True,
    connect_args=_connect_args(Config.DATABASE_URL),
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
