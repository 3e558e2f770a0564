# =============================================================================
# app/routers/threads.py - Discussion Thread Endpoints
# =============================================================================
# Threads, comments and likes for logged-in users; pin / unpin / delete
# for governmental users.
# =============================================================================

from typing import Annotated
from uuid import UUID

from fastapi import APIRouter, Path, status

from app.dependencies import CurrentUser, GovernmentUser, OptionalUser, user_id_of
from core.models.action import ActionKind, ThreadLikeStatus
from core.models.thread import Comment, CommentCreate, Thread, ThreadCreate, ThreadListItem
from core.services.action_service import ActionService
from core.services.thread_service import ThreadService

router = APIRouter()

ThreadId = Annotated[UUID, Path(description="Thread UUID")]


@router.get("", response_model=list[ThreadListItem])
async def list_threads():
    """Threads newest first, with comment counts and author names."""
    return ThreadService.list_threads()


@router.post("", response_model=Thread, status_code=status.HTTP_201_CREATED)
async def create_thread(request: ThreadCreate, user: CurrentUser):
    return ThreadService.create_thread(request, user.id)


@router.delete("/{thread_id}")
async def delete_thread(thread_id: ThreadId, user: GovernmentUser):
    """Delete a thread with its comments and likes."""
    ThreadService.delete_thread(thread_id)
    return {"ok": True}


# =============================================================================
# Comments
# =============================================================================

@router.get("/{thread_id}/comments", response_model=list[Comment])
async def list_comments(thread_id: ThreadId):
    return ThreadService.list_comments(thread_id)


@router.post("/{thread_id}/comments", response_model=Comment, status_code=status.HTTP_201_CREATED)
async def add_comment(thread_id: ThreadId, request: CommentCreate, user: CurrentUser):
    return ThreadService.add_comment(thread_id, request, user.id)


# =============================================================================
# Likes
# =============================================================================

@router.post("/{thread_id}/like", response_model=Thread)
async def like_thread(thread_id: ThreadId, user: OptionalUser):
    """
    Like a thread once.

    Raises:
        401: Not logged in
        404: Thread doesn't exist
        409: Already liked
    """
    return ActionService.perform(ActionKind.THREAD_LIKE, thread_id, user_id_of(user))


@router.post("/{thread_id}/unlike", response_model=Thread)
async def unlike_thread(thread_id: ThreadId, user: OptionalUser):
    return ActionService.revoke(ActionKind.THREAD_LIKE, thread_id, user_id_of(user))


@router.get("/{thread_id}/like-status", response_model=ThreadLikeStatus)
async def thread_like_status(thread_id: ThreadId, user: OptionalUser):
    liked = ActionService.has_acted(ActionKind.THREAD_LIKE, thread_id, user_id_of(user))
    return ThreadLikeStatus(liked=liked)


# =============================================================================
# Moderation
# =============================================================================

@router.post("/{thread_id}/pin", response_model=Thread)
async def pin_thread(thread_id: ThreadId, user: GovernmentUser):
    return ThreadService.set_pinned(thread_id, True)


@router.post("/{thread_id}/unpin", response_model=Thread)
async def unpin_thread(thread_id: ThreadId, user: GovernmentUser):
    return ThreadService.set_pinned(thread_id, False)
