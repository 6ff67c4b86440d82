"""Moderation actions, member bans, and moderator role assignments.

Erasing a moderation action or lifting a ban answers with the affected
record rather than an empty body.
"""

from board_contracts.sdk.fetcher import Operation
from board_contracts.sdk.structures import (
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
    Page,
)

_ACTIONS = "/discussionBoard/moderator/moderationActions"
_BANS = "/discussionBoard/moderator/bans"
_MODERATORS = "/discussionBoard/administrator/moderators"

create_action = Operation("moderation_actions", "create", "POST", _ACTIONS, ModerationActionCreate, ModerationAction)
index_actions = Operation(
    "moderation_actions", "index", "PATCH", _ACTIONS, ModerationActionRequest, Page[ModerationActionSummary]
)
at_action = Operation("moderation_actions", "at", "GET", f"{_ACTIONS}/{{moderationActionId}}", None, ModerationAction)
update_action = Operation(
    "moderation_actions", "update", "PUT", f"{_ACTIONS}/{{moderationActionId}}", ModerationActionUpdate, ModerationAction
)
erase_action = Operation("moderation_actions", "erase", "DELETE", f"{_ACTIONS}/{{moderationActionId}}", None, ModerationAction)

create_ban = Operation("bans", "create", "POST", _BANS, BanCreate, Ban)
index_bans = Operation("bans", "index", "PATCH", _BANS, BanRequest, Page[BanSummary])
at_ban = Operation("bans", "at", "GET", f"{_BANS}/{{banId}}", None, Ban)
update_ban = Operation("bans", "update", "PUT", f"{_BANS}/{{banId}}", BanUpdate, Ban)
erase_ban = Operation("bans", "erase", "DELETE", f"{_BANS}/{{banId}}", None, Ban)

create_moderator = Operation("moderators", "create", "POST", _MODERATORS, ModeratorCreate, Moderator)
index_moderators = Operation("moderators", "index", "PATCH", _MODERATORS, ModeratorRequest, Page[Moderator])
at_moderator = Operation("moderators", "at", "GET", f"{_MODERATORS}/{{moderatorId}}", None, Moderator)
erase_moderator = Operation("moderators", "erase", "DELETE", f"{_MODERATORS}/{{moderatorId}}")
