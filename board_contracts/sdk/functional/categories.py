"""Board categories (administrator managed, publicly readable)."""

from board_contracts.sdk.fetcher import Operation
from board_contracts.sdk.structures import Category, CategoryCreate, CategoryRequest, CategorySummary, CategoryUpdate, Page

create = Operation("categories", "create", "POST", "/discussionBoard/administrator/categories", CategoryCreate, Category)
index = Operation("categories", "index", "PATCH", "/discussionBoard/categories", CategoryRequest, Page[CategorySummary])
at = Operation("categories", "at", "GET", "/discussionBoard/categories/{categoryId}", None, Category)
update = Operation(
    "categories", "update", "PUT", "/discussionBoard/administrator/categories/{categoryId}", CategoryUpdate, Category
)
erase = Operation("categories", "erase", "DELETE", "/discussionBoard/administrator/categories/{categoryId}")
