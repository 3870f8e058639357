from pydantic import BaseModel, ConfigDict, Field, AliasChoices, StringConstraints, field_validator
from typing import Annotated, Literal, Optional
from datetime import datetime

# Properties accepted by POST /api/posts
class PostCreate(BaseModel):
    # Whitespace-only titles are rejected like empty ones
    title: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
    content: str
    # The form sends the key as "imageUrl"
    image_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("imageUrl", "image_url"),
    )

    @field_validator("image_url")
    @classmethod
    def blank_image_url_is_none(cls, value: Optional[str]) -> Optional[str]:
        # The form posts "" when no image was chosen
        return value or None

# Properties to return to the client (The "Response" Model)
class Post(BaseModel):
    id: int
    title: str
    content: str
    # Accept either spelling so a serialized Post validates back into itself
    image_url: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("image_url", "imageUrl"),
        serialization_alias="imageUrl",
    )
    published: bool
    created_at: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )

    # Read straight off SQLAlchemy rows
    model_config = ConfigDict(from_attributes=True)

class PostCreated(BaseModel):
    success: Literal[True] = True
    post: Post

# Persistence failures are reported in the body, not via the status code
class PostCreateFailed(BaseModel):
    success: Literal[False] = False
    error: str
