"""Threads, their posts, and the comments under each post."""

from board_contracts.sdk.fetcher import Operation
from board_contracts.sdk.structures import (
    Comment,
    CommentCreate,
    CommentRequest,
    CommentSummary,
    CommentUpdate,
    Page,
    Post,
    PostCreate,
    PostRequest,
    PostSummary,
    PostUpdate,
    Thread,
    ThreadCreate,
    ThreadRequest,
    ThreadSummary,
    ThreadUpdate,
)

_MEMBER_THREAD = "/discussionBoard/member/threads/{threadId}"
_PUBLIC_THREAD = "/discussionBoard/threads/{threadId}"

create = Operation("threads", "create", "POST", "/discussionBoard/member/threads", ThreadCreate, Thread)
index = Operation("threads", "index", "PATCH", "/discussionBoard/threads", ThreadRequest, Page[ThreadSummary])
at = Operation("threads", "at", "GET", _PUBLIC_THREAD, None, Thread)
update = Operation("threads", "update", "PUT", _MEMBER_THREAD, ThreadUpdate, Thread)
erase = Operation("threads", "erase", "DELETE", _MEMBER_THREAD)

create_post = Operation("posts", "create", "POST", f"{_MEMBER_THREAD}/posts", PostCreate, Post)
index_posts = Operation("posts", "index", "PATCH", f"{_PUBLIC_THREAD}/posts", PostRequest, Page[PostSummary])
at_post = Operation("posts", "at", "GET", f"{_PUBLIC_THREAD}/posts/{{postId}}", None, Post)
update_post = Operation("posts", "update", "PUT", f"{_MEMBER_THREAD}/posts/{{postId}}", PostUpdate, Post)
erase_post = Operation("posts", "erase", "DELETE", f"{_MEMBER_THREAD}/posts/{{postId}}")

create_comment = Operation(
    "comments", "create", "POST", f"{_MEMBER_THREAD}/posts/{{postId}}/comments", CommentCreate, Comment
)
index_comments = Operation(
    "comments", "index", "PATCH", f"{_PUBLIC_THREAD}/posts/{{postId}}/comments", CommentRequest, Page[CommentSummary]
)
at_comment = Operation("comments", "at", "GET", f"{_PUBLIC_THREAD}/posts/{{postId}}/comments/{{commentId}}", None, Comment)
update_comment = Operation(
    "comments", "update", "PUT", f"{_MEMBER_THREAD}/posts/{{postId}}/comments/{{commentId}}", CommentUpdate, Comment
)
erase_comment = Operation("comments", "erase", "DELETE", f"{_MEMBER_THREAD}/posts/{{postId}}/comments/{{commentId}}")
