"""Member, moderator and administrator authentication."""

from board_contracts.sdk.fetcher import Operation
from board_contracts.sdk.structures import (
    AdministratorJoin,
    AdministratorLogin,
    AuthorizedAdministrator,
    AuthorizedMember,
    AuthorizedModerator,
    MemberJoin,
    MemberLogin,
    ModeratorJoin,
    ModeratorLogin,
    TokenRefresh,
)

member_join = Operation("auth.member", "join", "POST", "/auth/member/join", MemberJoin, AuthorizedMember)
member_login = Operation("auth.member", "login", "POST", "/auth/member/login", MemberLogin, AuthorizedMember)
member_refresh = Operation("auth.member", "refresh", "POST", "/auth/member/refresh", TokenRefresh, AuthorizedMember)

moderator_join = Operation("auth.moderator", "join", "POST", "/auth/moderator/join", ModeratorJoin, AuthorizedModerator)
moderator_login = Operation(
    "auth.moderator", "login", "POST", "/auth/moderator/login", ModeratorLogin, AuthorizedModerator
)
moderator_refresh = Operation(
    "auth.moderator", "refresh", "POST", "/auth/moderator/refresh", TokenRefresh, AuthorizedModerator
)

administrator_join = Operation(
    "auth.administrator", "join", "POST", "/auth/administrator/join", AdministratorJoin, AuthorizedAdministrator
)
administrator_login = Operation(
    "auth.administrator", "login", "POST", "/auth/administrator/login", AdministratorLogin, AuthorizedAdministrator
)
administrator_refresh = Operation(
    "auth.administrator", "refresh", "POST", "/auth/administrator/refresh", TokenRefresh, AuthorizedAdministrator
)
