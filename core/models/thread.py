# =============================================================================
# core/models/thread.py - Discussion Thread Schemas
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, Field

from .user import AuthorSummary


class ThreadCreate(BaseModel):
    """Schema for starting a discussion thread."""
    title_bn: str = Field(..., min_length=1, max_length=255)
    title_en: str = Field(..., min_length=1, max_length=255)
    content_bn: str = Field(..., min_length=1)
    content_en: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)


class CommentCreate(BaseModel):
    """Schema for commenting on a thread."""
    text: str = Field(..., min_length=1, max_length=5000)


class Thread(BaseModel):
    id: str
    title_bn: str
    title_en: str
    content_bn: str
    content_en: str
    category: str
    author_id: str
    likes: int = 0
    pinned: int = 0
    created_at: datetime | None = None


class ThreadListItem(Thread):
    """Thread with its comment count and author names."""
    comment_count: int = 0
    author: AuthorSummary | None = None


class Comment(BaseModel):
    id: str
    thread_id: str
    author_id: str
    text: str
    created_at: datetime | None = None
    author: AuthorSummary | None = None
