from sqlalchemy import Column, Integer, String, Text, Boolean, DateTime, false
from sqlalchemy.sql import func
from blog.database import Base

class Post(Base):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    content = Column(Text, nullable=False)

    # Relative URL of an uploaded image (e.g. "/uploads/1718000000000-ab12.png")
    image_url = Column(String, nullable=True)

    # Only published posts show up on the public pages
    published = Column(Boolean, nullable=False, default=False, server_default=false())

    created_at = Column(DateTime(timezone=True), nullable=False, server_default=func.now(), index=True)
