# =============================================================================
# core/services/thread_service.py - Discussion Threads
# =============================================================================
# Threads and their comments. Likes go through ActionService
# (ActionKind.THREAD_LIKE); pin / unpin / delete are governmental.
# =============================================================================

import logging
from collections import Counter
from typing import Any
from uuid import UUID

from app.exceptions import NotFoundError
from core.models.thread import CommentCreate, ThreadCreate
from core.services.user_service import UserService
from lib.supabase_client import SupabaseClient
from lib.utils import normalize_uuid

logger = logging.getLogger(__name__)

THREADS_TABLE = "threads"
COMMENTS_TABLE = "thread_comments"
LIKES_TABLE = "thread_likes"


class ThreadService:
    """
    Service for thread and comment operations.
    """

    @staticmethod
    def get_thread(thread_id: str | UUID) -> dict[str, Any]:
        """
        Get a thread by ID.

        Raises:
            NotFoundError: If the thread doesn't exist
        """
        thread_id = normalize_uuid(thread_id)
        thread = SupabaseClient.fetch_one(THREADS_TABLE, {"id": thread_id})
        if not thread:
            raise NotFoundError("Thread not found", details={"id": thread_id})
        return thread

    @staticmethod
    def list_threads() -> list[dict[str, Any]]:
        """
        All threads, newest first.

        Each thread carries `comment_count` and `author`
        ({username, first_name, last_name}, or None if the author is gone).
        """
        threads = SupabaseClient.fetch_rows(THREADS_TABLE, order_by="created_at", desc=True)
        thread_ids = [t["id"] for t in threads]

        comments = SupabaseClient.fetch_rows(
            COMMENTS_TABLE, in_filters={"thread_id": thread_ids}, columns="thread_id"
        )
        counts = Counter(c["thread_id"] for c in comments)
        authors = UserService.author_summaries([t.get("author_id") for t in threads])

        for thread in threads:
            thread["comment_count"] = counts.get(thread["id"], 0)
            thread["author"] = authors.get(thread.get("author_id"))
        return threads

    @staticmethod
    def create_thread(request: ThreadCreate, author_id: str | UUID) -> dict[str, Any]:
        data = request.model_dump()
        data["author_id"] = normalize_uuid(author_id)

        thread = SupabaseClient.insert_row(THREADS_TABLE, data)
        logger.info(f"Created thread: {thread['id']}")
        return thread

    @staticmethod
    def set_pinned(thread_id: str | UUID, pinned: bool) -> dict[str, Any]:
        """
        Pin or unpin a thread.

        Raises:
            NotFoundError: If the thread doesn't exist
        """
        thread_id = normalize_uuid(thread_id)
        updated = SupabaseClient.update_rows(
            THREADS_TABLE, {"pinned": 1 if pinned else 0}, {"id": thread_id}
        )
        if not updated:
            raise NotFoundError("Thread not found", details={"id": thread_id})
        return updated[0]

    @staticmethod
    def delete_thread(thread_id: str | UUID) -> None:
        """Delete a thread together with its comments and likes."""
        thread_id = normalize_uuid(thread_id)
        SupabaseClient.delete_rows(COMMENTS_TABLE, {"thread_id": thread_id})
        SupabaseClient.delete_rows(LIKES_TABLE, {"thread_id": thread_id})
        SupabaseClient.delete_rows(THREADS_TABLE, {"id": thread_id})
        logger.info(f"Deleted thread: {thread_id}")

    # -------------------------------------------------------------------------
    # Comments
    # -------------------------------------------------------------------------

    @staticmethod
    def list_comments(thread_id: str | UUID) -> list[dict[str, Any]]:
        """Comments on a thread, newest first, each with `author`."""
        comments = SupabaseClient.fetch_rows(
            COMMENTS_TABLE,
            {"thread_id": normalize_uuid(thread_id)},
            order_by="created_at",
            desc=True,
        )
        authors = UserService.author_summaries([c.get("author_id") for c in comments])
        for comment in comments:
            comment["author"] = authors.get(comment.get("author_id"))
        return comments

    @staticmethod
    def add_comment(
        thread_id: str | UUID,
        request: CommentCreate,
        author_id: str | UUID,
    ) -> dict[str, Any]:
        """
        Comment on a thread.

        Raises:
            NotFoundError: If the thread doesn't exist
        """
        thread = ThreadService.get_thread(thread_id)
        comment = SupabaseClient.insert_row(
            COMMENTS_TABLE,
            {
                "thread_id": thread["id"],
                "author_id": normalize_uuid(author_id),
                "text": request.text,
            },
        )
        logger.info(f"Comment {comment['id']} added to thread {thread['id']}")
        return comment
