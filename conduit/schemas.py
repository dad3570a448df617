from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


# --- Article ---

class NewArticle(BaseModel):
    title: str = Field(min_length=1, max_length=300)
    description: str
    body: str
    tags: set[str] = set()

    @field_validator("tags")
    @classmethod
    def _strip_tags(cls, value: set[str]) -> set[str]:
        # " go" and "go" are the same tag.
        return {tag.strip() for tag in value if tag.strip()}


class ArticleCreated(BaseModel):
    id: int
    slug: str
    title: str
    description: str
    body: str
    author_id: int
    tags: list[str] = []
    created_at: datetime
    updated_at: datetime
    model_config = ConfigDict(frozen=True)
