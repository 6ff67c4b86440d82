"""Declarative table of contract cases for every discussion board operation.

Each operation gets a success case; every operation addressed by an
identifier also gets a not-found case called with a fresh random UUID; create
operations whose required fields cannot be left out of the typed request model
get an omitted case. Sign-up, login and token refresh also get rejected cases
for duplicate emails, wrong passwords and unknown refresh tokens.

Calls run with the connection handed to the case, normally an administrator
session. Routes under ``/member/`` and ``/moderator/`` instead use the session
their prepare hook signs up (``member_connection`` or ``moderator_connection``).
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Iterable, Mapping
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import uuid4

from pydantic import BaseModel

from board_contracts.contract import Context, ContractCase, Expectation, connection_for, verify_success
from board_contracts.sdk import Connection, Operation
from board_contracts.sdk.functional import (
    all_operations,
    auth,
    categories,
    engagement,
    moderation,
    notifications,
    tags,
    threads,
)
from board_contracts.sdk.structures import (
    AdministratorJoin,
    AdministratorLogin,
    BanCreate,
    BanUpdate,
    CategoryCreate,
    CommentCreate,
    MemberJoin,
    MemberLogin,
    ModerationActionCreate,
    ModeratorCreate,
    ModeratorJoin,
    ModeratorLogin,
    NotificationCreate,
    PollCreate,
    PollUpdate,
    PollVoteCreate,
    ThreadCreate,
    TokenRefresh,
    VoteCreate,
)
from board_contracts.synthesis import random_value, unique_email
from board_contracts.validation import assert_conforms

OPERATIONS: tuple[Operation, ...] = all_operations()

Prepare = Callable[[Connection], Awaitable[dict[str, Any]]]

# Polls and bans must still be open when the backend receives them.
_HORIZON = timedelta(days=30)


# ---------------------------------------------------------------------------
# Payload factories
# ---------------------------------------------------------------------------


def _future() -> datetime:
    return datetime.now(timezone.utc) + _HORIZON


def _join_body(model: type[BaseModel]) -> Callable[[Context], BaseModel]:
    def body(context: Context) -> BaseModel:
        return random_value(model).model_copy(update={"email": unique_email()})

    return body


def _category_body(context: Context) -> CategoryCreate:
    return random_value(CategoryCreate).model_copy(update={"parent_id": None})


def _thread_body(context: Context) -> ThreadCreate:
    return random_value(ThreadCreate).model_copy(update={"category_id": context["category"].id, "tag_ids": None})


def _comment_body(context: Context) -> CommentCreate:
    return random_value(CommentCreate).model_copy(update={"parent_id": None})


def _vote_body(context: Context) -> VoteCreate:
    return random_value(VoteCreate).model_copy(update={"post_id": context["post"].id, "comment_id": None})


def _poll_body(context: Context) -> PollCreate:
    return random_value(PollCreate).model_copy(update={"closes_at": _future()})


def _poll_update_body(context: Context) -> PollUpdate:
    return random_value(PollUpdate).model_copy(update={"closes_at": _future()})


def _poll_vote_body(context: Context) -> PollVoteCreate:
    return PollVoteCreate(option_id=context["poll"].options[0].id)


def _moderation_action_body(context: Context) -> ModerationActionCreate:
    return random_value(ModerationActionCreate).model_copy(
        update={"target_type": "post", "target_id": context["post"].id}
    )


def _ban_body(context: Context) -> BanCreate:
    return random_value(BanCreate).model_copy(update={"member_id": context["member"].id, "expires_at": _future()})


def _ban_update_body(context: Context) -> BanUpdate:
    return random_value(BanUpdate).model_copy(update={"expires_at": _future()})


def _moderator_body(context: Context) -> ModeratorCreate:
    return ModeratorCreate(member_id=context["member"].id)


def _notification_body(context: Context) -> NotificationCreate:
    return random_value(NotificationCreate).model_copy(update={"recipient_id": context["member"].id})


def _login(model: type[BaseModel], join: str) -> Callable[[Context], BaseModel]:
    def body(context: Context) -> BaseModel:
        return model(email=context[join].email, password=context[join].password)

    return body


def _wrong_password(model: type[BaseModel], join: str) -> Callable[[Context], BaseModel]:
    def body(context: Context) -> BaseModel:
        password = context[join].password
        wrong = password + "x" if len(password) < 64 else password[:-1]
        return model(email=context[join].email, password=wrong)

    return body


def _duplicate_join(join: str) -> Callable[[Context], BaseModel]:
    """A new sign-up reusing the email of the account stored under ``join``."""

    def body(context: Context) -> BaseModel:
        existing = context[join]
        return random_value(type(existing)).model_copy(update={"email": existing.email})

    return body


def _refresh(account: str) -> Callable[[Context], TokenRefresh]:
    def body(context: Context) -> TokenRefresh:
        return TokenRefresh(refresh_token=context[account].token.refresh)

    return body


def _unknown_refresh(context: Context) -> TokenRefresh:
    return TokenRefresh(refresh_token=uuid4().hex)


# ---------------------------------------------------------------------------
# Prerequisite fixtures
# ---------------------------------------------------------------------------


async def _created(
    operation: Operation,
    connection: Connection,
    context: Context,
    body: BaseModel | None = None,
    **path_params: Any,
) -> Any:
    caller = connection_for(operation, context, connection)
    response = await verify_success(operation, caller, body=body, **path_params)
    return assert_conforms(response, operation.response)


def _merge(*hooks: Prepare) -> Prepare:
    """Run several prepare hooks in order and combine their contexts."""

    async def prepare(connection: Connection) -> dict[str, Any]:
        context: dict[str, Any] = {}
        for hook in hooks:
            context.update(await hook(connection))
        return context

    return prepare


async def _member(connection: Connection) -> dict[str, Any]:
    join = _join_body(MemberJoin)({})
    member = await _created(auth.member_join, connection, {}, join)
    return {
        "member_join": join,
        "member": member,
        "member_connection": connection.with_token(member.token.access),
    }


async def _moderator_session(connection: Connection) -> dict[str, Any]:
    join = _join_body(ModeratorJoin)({})
    account = await _created(auth.moderator_join, connection, {}, join)
    return {
        "moderator_join": join,
        "moderator_account": account,
        "moderator_connection": connection.with_token(account.token.access),
    }


async def _administrator(connection: Connection) -> dict[str, Any]:
    join = _join_body(AdministratorJoin)({})
    return {"administrator_join": join, "administrator": await _created(auth.administrator_join, connection, {}, join)}


async def _category(connection: Connection) -> dict[str, Any]:
    return {"category": await _created(categories.create, connection, {}, _category_body({}))}


async def _tag(connection: Connection) -> dict[str, Any]:
    return {"tag": await _created(tags.create, connection, {})}


async def _thread(connection: Connection) -> dict[str, Any]:
    context = await _merge(_category, _member)(connection)
    context["thread"] = await _created(threads.create, connection, context, _thread_body(context))
    return context


async def _post(connection: Connection) -> dict[str, Any]:
    context = await _thread(connection)
    context["post"] = await _created(threads.create_post, connection, context, threadId=context["thread"].id)
    return context


async def _comment(connection: Connection) -> dict[str, Any]:
    context = await _post(connection)
    context["comment"] = await _created(
        threads.create_comment,
        connection,
        context,
        _comment_body(context),
        threadId=context["thread"].id,
        postId=context["post"].id,
    )
    return context


async def _vote(connection: Connection) -> dict[str, Any]:
    context = await _post(connection)
    context["vote"] = await _created(engagement.create_vote, connection, context, _vote_body(context))
    return context


async def _poll(connection: Connection) -> dict[str, Any]:
    context = await _post(connection)
    context["poll"] = await _created(
        engagement.create_poll, connection, context, _poll_body(context), postId=context["post"].id
    )
    return context


async def _poll_vote(connection: Connection) -> dict[str, Any]:
    context = await _poll(connection)
    context["poll_vote"] = await _created(
        engagement.create_poll_vote,
        connection,
        context,
        _poll_vote_body(context),
        pollId=context["poll"].id,
    )
    return context


async def _moderation_action(connection: Connection) -> dict[str, Any]:
    context = await _merge(_post, _moderator_session)(connection)
    context["moderation_action"] = await _created(
        moderation.create_action, connection, context, _moderation_action_body(context)
    )
    return context


async def _ban(connection: Connection) -> dict[str, Any]:
    context = await _merge(_member, _moderator_session)(connection)
    context["ban"] = await _created(moderation.create_ban, connection, context, _ban_body(context))
    return context


async def _moderator(connection: Connection) -> dict[str, Any]:
    context = await _member(connection)
    context["moderator"] = await _created(moderation.create_moderator, connection, context, _moderator_body(context))
    return context


async def _notification(connection: Connection) -> dict[str, Any]:
    context = await _member(connection)
    context["notification"] = await _created(
        notifications.create_notification, connection, context, _notification_body(context)
    )
    return context


async def _setting(connection: Connection) -> dict[str, Any]:
    return {"setting": await _created(notifications.create_setting, connection, {})}


def _ids(**parameters: str) -> Callable[[Context], Mapping[str, Any]]:
    """Map path parameters to the ids of context entries, e.g. ``_ids(postId="post")``."""

    def path(context: Context) -> Mapping[str, Any]:
        return {parameter: context[key].id for parameter, key in parameters.items()}

    return path


# ---------------------------------------------------------------------------
# Case constructors
# ---------------------------------------------------------------------------

# Sessions signed up for cases on role routes that name no prepare hook.
_SESSIONS: dict[str, Prepare] = {"member": _member, "moderator": _moderator_session}


def _case_name(operation: Operation, suffix: str) -> str:
    return f"test_api_{operation.name.replace('.', '_')}_{suffix}"


def _case(operation: Operation, suffix: str, expect: Expectation, **kwargs: Any) -> ContractCase:
    if operation.role is not None:
        kwargs.setdefault("prepare", _SESSIONS.get(operation.role))
    return ContractCase(name=_case_name(operation, suffix), operation=operation, expect=expect, **kwargs)


def _success(operation: Operation, **kwargs: Any) -> ContractCase:
    return _case(operation, "success", Expectation.SUCCESS, **kwargs)


def _not_found(operation: Operation, **kwargs: Any) -> ContractCase:
    return _case(operation, "not_found", Expectation.NOT_FOUND, **kwargs)


def _rejected(operation: Operation, suffix: str, **kwargs: Any) -> ContractCase:
    return _case(operation, suffix, Expectation.REJECTED, **kwargs)


def _omitted(operation: Operation, field: str) -> ContractCase:
    request = operation.request.__name__ if operation.request is not None else "request"
    return ContractCase(
        name=_case_name(operation, f"without_{field}"),
        operation=operation,
        expect=Expectation.OMITTED,
        reason=f"{request} cannot be built without its required field '{field}'",
    )


_AUTH_CASES = (
    _success(auth.member_join, body=_join_body(MemberJoin)),
    _success(auth.member_login, prepare=_member, body=_login(MemberLogin, "member_join")),
    _success(auth.member_refresh, prepare=_member, body=_refresh("member")),
    _rejected(auth.member_join, "duplicate_email", prepare=_member, body=_duplicate_join("member_join")),
    _rejected(auth.member_login, "wrong_password", prepare=_member, body=_wrong_password(MemberLogin, "member_join")),
    _rejected(auth.member_refresh, "unknown_token", body=_unknown_refresh),
    _omitted(auth.member_join, "email"),
    _omitted(auth.member_join, "password"),
    _success(auth.moderator_join, body=_join_body(ModeratorJoin)),
    _success(auth.moderator_login, prepare=_moderator_session, body=_login(ModeratorLogin, "moderator_join")),
    _success(auth.moderator_refresh, prepare=_moderator_session, body=_refresh("moderator_account")),
    _rejected(
        auth.moderator_join, "duplicate_email", prepare=_moderator_session, body=_duplicate_join("moderator_join")
    ),
    _rejected(
        auth.moderator_login,
        "wrong_password",
        prepare=_moderator_session,
        body=_wrong_password(ModeratorLogin, "moderator_join"),
    ),
    _rejected(auth.moderator_refresh, "unknown_token", body=_unknown_refresh),
    _omitted(auth.moderator_join, "email"),
    _success(auth.administrator_join, body=_join_body(AdministratorJoin)),
    _success(auth.administrator_login, prepare=_administrator, body=_login(AdministratorLogin, "administrator_join")),
    _success(auth.administrator_refresh, prepare=_administrator, body=_refresh("administrator")),
    _rejected(
        auth.administrator_join,
        "duplicate_email",
        prepare=_administrator,
        body=_duplicate_join("administrator_join"),
    ),
    _rejected(
        auth.administrator_login,
        "wrong_password",
        prepare=_administrator,
        body=_wrong_password(AdministratorLogin, "administrator_join"),
    ),
    _rejected(auth.administrator_refresh, "unknown_token", body=_unknown_refresh),
    _omitted(auth.administrator_join, "email"),
)

_CATEGORY_CASES = (
    _success(categories.create, body=_category_body),
    _success(categories.index),
    _success(categories.at, prepare=_category, path=_ids(categoryId="category")),
    _not_found(categories.at),
    _success(categories.update, prepare=_category, path=_ids(categoryId="category")),
    _not_found(categories.update),
    _success(categories.erase, prepare=_category, path=_ids(categoryId="category")),
    _not_found(categories.erase),
    _omitted(categories.create, "name"),
)

_TAG_CASES = (
    _success(tags.create),
    _success(tags.index),
    _success(tags.at, prepare=_tag, path=_ids(tagId="tag")),
    _not_found(tags.at),
    _success(tags.update, prepare=_tag, path=_ids(tagId="tag")),
    _not_found(tags.update),
    _success(tags.erase, prepare=_tag, path=_ids(tagId="tag")),
    _not_found(tags.erase),
    _omitted(tags.create, "name"),
)

_THREAD_CASES = (
    _success(threads.create, prepare=_merge(_category, _member), body=_thread_body),
    _success(threads.index),
    _success(threads.at, prepare=_thread, path=_ids(threadId="thread")),
    _not_found(threads.at),
    _success(threads.update, prepare=_thread, path=_ids(threadId="thread")),
    _not_found(threads.update),
    _success(threads.erase, prepare=_thread, path=_ids(threadId="thread")),
    _not_found(threads.erase),
    _omitted(threads.create, "title"),
)

_POST_CASES = (
    _success(threads.create_post, prepare=_thread, path=_ids(threadId="thread")),
    _not_found(threads.create_post),
    _success(threads.index_posts, prepare=_post, path=_ids(threadId="thread")),
    _not_found(threads.index_posts),
    _success(threads.at_post, prepare=_post, path=_ids(threadId="thread", postId="post")),
    _not_found(threads.at_post, prepare=_thread, path=_ids(threadId="thread")),
    _success(threads.update_post, prepare=_post, path=_ids(threadId="thread", postId="post")),
    _not_found(threads.update_post, prepare=_thread, path=_ids(threadId="thread")),
    _success(threads.erase_post, prepare=_post, path=_ids(threadId="thread", postId="post")),
    _not_found(threads.erase_post, prepare=_thread, path=_ids(threadId="thread")),
    _omitted(threads.create_post, "body"),
)

_COMMENT_CASES = (
    _success(threads.create_comment, prepare=_post, path=_ids(threadId="thread", postId="post"), body=_comment_body),
    _not_found(threads.create_comment, prepare=_thread, path=_ids(threadId="thread"), body=_comment_body),
    _success(threads.index_comments, prepare=_comment, path=_ids(threadId="thread", postId="post")),
    _not_found(threads.index_comments, prepare=_thread, path=_ids(threadId="thread")),
    _success(threads.at_comment, prepare=_comment, path=_ids(threadId="thread", postId="post", commentId="comment")),
    _not_found(threads.at_comment, prepare=_post, path=_ids(threadId="thread", postId="post")),
    _success(
        threads.update_comment,
        prepare=_comment,
        path=_ids(threadId="thread", postId="post", commentId="comment"),
    ),
    _not_found(threads.update_comment, prepare=_post, path=_ids(threadId="thread", postId="post")),
    _success(
        threads.erase_comment,
        prepare=_comment,
        path=_ids(threadId="thread", postId="post", commentId="comment"),
    ),
    _not_found(threads.erase_comment, prepare=_post, path=_ids(threadId="thread", postId="post")),
    _omitted(threads.create_comment, "body"),
)

_VOTE_CASES = (
    _success(engagement.create_vote, prepare=_post, body=_vote_body),
    _success(engagement.at_vote, prepare=_vote, path=_ids(voteId="vote")),
    _not_found(engagement.at_vote),
    _success(engagement.update_vote, prepare=_vote, path=_ids(voteId="vote")),
    _not_found(engagement.update_vote),
    _success(engagement.erase_vote, prepare=_vote, path=_ids(voteId="vote")),
    _not_found(engagement.erase_vote),
    _omitted(engagement.create_vote, "vote_type"),
)

_POLL_CASES = (
    _success(engagement.create_poll, prepare=_post, path=_ids(postId="post"), body=_poll_body),
    _not_found(engagement.create_poll, body=_poll_body),
    _success(engagement.at_poll, prepare=_poll, path=_ids(postId="post", pollId="poll")),
    _not_found(engagement.at_poll, prepare=_post, path=_ids(postId="post")),
    _success(engagement.update_poll, prepare=_poll, path=_ids(postId="post", pollId="poll"), body=_poll_update_body),
    _not_found(engagement.update_poll, prepare=_post, path=_ids(postId="post"), body=_poll_update_body),
    _success(engagement.erase_poll, prepare=_poll, path=_ids(postId="post", pollId="poll")),
    _not_found(engagement.erase_poll, prepare=_post, path=_ids(postId="post")),
    _omitted(engagement.create_poll, "options"),
    _success(engagement.create_poll_vote, prepare=_poll, path=_ids(pollId="poll"), body=_poll_vote_body),
    _not_found(engagement.create_poll_vote),
    _success(engagement.at_poll_vote, prepare=_poll_vote, path=_ids(pollId="poll", pollVoteId="poll_vote")),
    _not_found(engagement.at_poll_vote, prepare=_poll, path=_ids(pollId="poll")),
    _success(engagement.erase_poll_vote, prepare=_poll_vote, path=_ids(pollId="poll", pollVoteId="poll_vote")),
    _not_found(engagement.erase_poll_vote, prepare=_poll, path=_ids(pollId="poll")),
)

_MODERATION_CASES = (
    _success(moderation.create_action, prepare=_merge(_post, _moderator_session), body=_moderation_action_body),
    _success(moderation.index_actions),
    _success(moderation.at_action, prepare=_moderation_action, path=_ids(moderationActionId="moderation_action")),
    _not_found(moderation.at_action),
    _success(moderation.update_action, prepare=_moderation_action, path=_ids(moderationActionId="moderation_action")),
    _not_found(moderation.update_action),
    _success(moderation.erase_action, prepare=_moderation_action, path=_ids(moderationActionId="moderation_action")),
    _not_found(moderation.erase_action),
    _omitted(moderation.create_action, "reason"),
    _success(moderation.create_ban, prepare=_merge(_member, _moderator_session), body=_ban_body),
    _success(moderation.index_bans),
    _success(moderation.at_ban, prepare=_ban, path=_ids(banId="ban")),
    _not_found(moderation.at_ban),
    _success(moderation.update_ban, prepare=_ban, path=_ids(banId="ban"), body=_ban_update_body),
    _not_found(moderation.update_ban, body=_ban_update_body),
    _success(moderation.erase_ban, prepare=_ban, path=_ids(banId="ban")),
    _not_found(moderation.erase_ban),
    _omitted(moderation.create_ban, "member_id"),
)

_ROLE_CASES = (
    _success(moderation.create_moderator, prepare=_member, body=_moderator_body),
    _success(moderation.index_moderators),
    _success(moderation.at_moderator, prepare=_moderator, path=_ids(moderatorId="moderator")),
    _not_found(moderation.at_moderator),
    _success(moderation.erase_moderator, prepare=_moderator, path=_ids(moderatorId="moderator")),
    _not_found(moderation.erase_moderator),
    _omitted(moderation.create_moderator, "member_id"),
)

_NOTIFICATION_CASES = (
    _success(notifications.create_notification, prepare=_member, body=_notification_body),
    _success(notifications.index_notifications),
    _success(notifications.at_notification, prepare=_notification, path=_ids(notificationId="notification")),
    _not_found(notifications.at_notification),
    _success(notifications.update_notification, prepare=_notification, path=_ids(notificationId="notification")),
    _not_found(notifications.update_notification),
    _success(notifications.erase_notification, prepare=_notification, path=_ids(notificationId="notification")),
    _not_found(notifications.erase_notification),
    _omitted(notifications.create_notification, "recipient_id"),
)

_SETTING_CASES = (
    _success(notifications.create_setting),
    _success(notifications.index_settings),
    _success(notifications.at_setting, prepare=_setting, path=_ids(settingId="setting")),
    _not_found(notifications.at_setting),
    _success(notifications.update_setting, prepare=_setting, path=_ids(settingId="setting")),
    _not_found(notifications.update_setting),
    _success(notifications.erase_setting, prepare=_setting, path=_ids(settingId="setting")),
    _not_found(notifications.erase_setting),
    _omitted(notifications.create_setting, "key"),
)

CATALOG: tuple[ContractCase, ...] = (
    *_AUTH_CASES,
    *_CATEGORY_CASES,
    *_TAG_CASES,
    *_THREAD_CASES,
    *_POST_CASES,
    *_COMMENT_CASES,
    *_VOTE_CASES,
    *_POLL_CASES,
    *_MODERATION_CASES,
    *_ROLE_CASES,
    *_NOTIFICATION_CASES,
    *_SETTING_CASES,
)


def select(cases: Iterable[ContractCase], match: str | None = None) -> tuple[ContractCase, ...]:
    """Cases whose name or operation contains ``match`` (all cases when empty)."""
    if not match:
        return tuple(cases)
    return tuple(case for case in cases if match in case.name or match in case.operation.name)
