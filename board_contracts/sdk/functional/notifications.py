"""Member notifications and board-wide settings."""

from board_contracts.sdk.fetcher import Operation
from board_contracts.sdk.structures import (
    Notification,
    NotificationCreate,
    NotificationRequest,
    NotificationSummary,
    NotificationUpdate,
    Page,
    Setting,
    SettingCreate,
    SettingRequest,
    SettingSummary,
    SettingUpdate,
)

_INBOX = "/discussionBoard/member/notifications"
_SETTINGS = "/discussionBoard/administrator/settings"

create_notification = Operation(
    "notifications", "create", "POST", "/discussionBoard/administrator/notifications", NotificationCreate, Notification
)
index_notifications = Operation(
    "notifications", "index", "PATCH", _INBOX, NotificationRequest, Page[NotificationSummary]
)
at_notification = Operation("notifications", "at", "GET", f"{_INBOX}/{{notificationId}}", None, Notification)
update_notification = Operation(
    "notifications", "update", "PUT", f"{_INBOX}/{{notificationId}}", NotificationUpdate, Notification
)
erase_notification = Operation("notifications", "erase", "DELETE", f"{_INBOX}/{{notificationId}}")

create_setting = Operation("settings", "create", "POST", _SETTINGS, SettingCreate, Setting)
index_settings = Operation("settings", "index", "PATCH", _SETTINGS, SettingRequest, Page[SettingSummary])
at_setting = Operation("settings", "at", "GET", f"{_SETTINGS}/{{settingId}}", None, Setting)
update_setting = Operation("settings", "update", "PUT", f"{_SETTINGS}/{{settingId}}", SettingUpdate, Setting)
erase_setting = Operation("settings", "erase", "DELETE", f"{_SETTINGS}/{{settingId}}")
