"""Pagination utilities for list endpoints."""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from fastapi import Query
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy.orm import Query as SQLAlchemyQuery
from starlette.datastructures import URL


T = TypeVar("T")

DEFAULT_PAGE = 1


@dataclass
class PaginationParams:
    """Pagination parameters from query string."""
    page: int
    per_page: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.per_page


def fixed_page_size(per_page: int) -> Callable[..., PaginationParams]:
    """
    Pagination dependency factory for endpoints with a fixed page size.

    Only ``page`` is read from the query string.

    Usage:
        @router.get("/items")
        def list_items(pagination: PaginationParams = Depends(fixed_page_size(10))):
            ...
    """
    def dependency(
        page: int = Query(DEFAULT_PAGE, ge=1, description="Page number (1-indexed)"),
    ) -> PaginationParams:
        return PaginationParams(page=page, per_page=per_page)
    return dependency


def paginate_query(query: SQLAlchemyQuery, pagination: PaginationParams) -> tuple[list, int]:
    """
    Apply pagination to a SQLAlchemy query.

    Returns:
        (items, total_count)
    """
    total = query.order_by(None).count()
    items = query.offset(pagination.offset).limit(pagination.per_page).all()
    return items, total


# =============================================================================
# Length-aware page (data / links / meta envelope)
# =============================================================================

class PageLinks(BaseModel):
    first: str
    last: str
    prev: str | None
    next: str | None


class PageMeta(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current_page: int
    from_: int | None = Field(None, alias="from")
    last_page: int
    path: str
    per_page: int
    to: int | None
    total: int


@dataclass
class PaginatedResponse(Generic[T]):
    """A page of items plus the numbers needed to build links and meta."""
    items: list[T]
    total: int
    page: int
    per_page: int

    @classmethod
    def create(cls, items: list[T], total: int, pagination: PaginationParams) -> "PaginatedResponse[T]":
        return cls(items=items, total=total, page=pagination.page, per_page=pagination.per_page)

    @property
    def last_page(self) -> int:
        if self.per_page <= 0:
            return 1
        return max(1, (self.total + self.per_page - 1) // self.per_page)

    @property
    def first_item(self) -> int | None:
        if not self.items:
            return None
        return (self.page - 1) * self.per_page + 1

    @property
    def last_item(self) -> int | None:
        if not self.items:
            return None
        return (self.page - 1) * self.per_page + len(self.items)

    def links(self, url: URL) -> PageLinks:
        """Page links that keep every other query parameter of ``url``."""
        def page_url(page: int) -> str:
            return str(url.include_query_params(page=page))

        return PageLinks(
            first=page_url(1),
            last=page_url(self.last_page),
            prev=page_url(self.page - 1) if self.page > 1 else None,
            next=page_url(self.page + 1) if self.page < self.last_page else None,
        )

    def meta(self, url: URL) -> PageMeta:
        return PageMeta(
            current_page=self.page,
            from_=self.first_item,
            last_page=self.last_page,
            path=str(url.replace(query="")),
            per_page=self.per_page,
            to=self.last_item,
            total=self.total,
        )
