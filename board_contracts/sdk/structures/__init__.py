"""Request and response structures of the discussion board API."""

from board_contracts.sdk.structures.auth import (
    AdministratorJoin,
    AdministratorLogin,
    AuthorizationToken,
    AuthorizedAdministrator,
    AuthorizedMember,
    AuthorizedModerator,
    MemberJoin,
    MemberLogin,
    ModeratorJoin,
    ModeratorLogin,
    TokenRefresh,
)
from board_contracts.sdk.structures.categories import (
    Category,
    CategoryCreate,
    CategoryRequest,
    CategorySummary,
    CategoryUpdate,
    Tag,
    TagCreate,
    TagRequest,
    TagSummary,
    TagUpdate,
)
from board_contracts.sdk.structures.common import Email, Page, PageRequest, Pagination
from board_contracts.sdk.structures.engagement import (
    Poll,
    PollCreate,
    PollOption,
    PollUpdate,
    PollVote,
    PollVoteCreate,
    Vote,
    VoteCreate,
    VoteUpdate,
)
from board_contracts.sdk.structures.moderation import (
    Ban,
    BanCreate,
    BanRequest,
    BanSummary,
    BanUpdate,
    ModerationAction,
    ModerationActionCreate,
    ModerationActionRequest,
    ModerationActionSummary,
    ModerationActionUpdate,
    Moderator,
    ModeratorCreate,
    ModeratorRequest,
)
from board_contracts.sdk.structures.notifications import (
    Notification,
    NotificationCreate,
    NotificationRequest,
    NotificationSummary,
    NotificationUpdate,
    Setting,
    SettingCreate,
    SettingRequest,
    SettingSummary,
    SettingUpdate,
)
from board_contracts.sdk.structures.threads import (
    Comment,
    CommentCreate,
    CommentRequest,
    CommentSummary,
    CommentUpdate,
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

__all__ = [
    "AdministratorJoin",
    "AdministratorLogin",
    "AuthorizationToken",
    "AuthorizedAdministrator",
    "AuthorizedMember",
    "AuthorizedModerator",
    "Ban",
    "BanCreate",
    "BanRequest",
    "BanSummary",
    "BanUpdate",
    "Category",
    "CategoryCreate",
    "CategoryRequest",
    "CategorySummary",
    "CategoryUpdate",
    "Comment",
    "CommentCreate",
    "CommentRequest",
    "CommentSummary",
    "CommentUpdate",
    "Email",
    "MemberJoin",
    "MemberLogin",
    "ModerationAction",
    "ModerationActionCreate",
    "ModerationActionRequest",
    "ModerationActionSummary",
    "ModerationActionUpdate",
    "Moderator",
    "ModeratorCreate",
    "ModeratorJoin",
    "ModeratorLogin",
    "ModeratorRequest",
    "Notification",
    "NotificationCreate",
    "NotificationRequest",
    "NotificationSummary",
    "NotificationUpdate",
    "Page",
    "PageRequest",
    "Pagination",
    "Poll",
    "PollCreate",
    "PollOption",
    "PollUpdate",
    "PollVote",
    "PollVoteCreate",
    "Post",
    "PostCreate",
    "PostRequest",
    "PostSummary",
    "PostUpdate",
    "Setting",
    "SettingCreate",
    "SettingRequest",
    "SettingSummary",
    "SettingUpdate",
    "Tag",
    "TagCreate",
    "TagRequest",
    "TagSummary",
    "TagUpdate",
    "Thread",
    "ThreadCreate",
    "ThreadRequest",
    "ThreadSummary",
    "ThreadUpdate",
    "TokenRefresh",
    "Vote",
    "VoteCreate",
    "VoteUpdate",
]
