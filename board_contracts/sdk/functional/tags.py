"""Thread tags."""

from board_contracts.sdk.fetcher import Operation
from board_contracts.sdk.structures import Page, Tag, TagCreate, TagRequest, TagSummary, TagUpdate

create = Operation("tags", "create", "POST", "/discussionBoard/administrator/tags", TagCreate, Tag)
index = Operation("tags", "index", "PATCH", "/discussionBoard/tags", TagRequest, Page[TagSummary])
at = Operation("tags", "at", "GET", "/discussionBoard/tags/{tagId}", None, Tag)
update = Operation("tags", "update", "PUT", "/discussionBoard/administrator/tags/{tagId}", TagUpdate, Tag)
erase = Operation("tags", "erase", "DELETE", "/discussionBoard/administrator/tags/{tagId}")
