"""Utility modules."""

from contacts_api.utils.normalization import (
    escape_like,
    format_phone,
    normalize_email,
)
from contacts_api.utils.pagination import (
    PageLinks,
    PageMeta,
    PaginatedResponse,
    PaginationParams,
    fixed_page_size,
    paginate_query,
)

__all__ = [
    # Normalization
    "escape_like",
    "format_phone",
    "normalize_email",
    # Pagination
    "PageLinks",
    "PageMeta",
    "PaginationParams",
    "PaginatedResponse",
    "fixed_page_size",
    "paginate_query",
]
