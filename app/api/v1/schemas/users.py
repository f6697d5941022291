"""
User listing request and response schemas.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field

from app.api.v1.models.user import User
from config import settings


class SortField(str, Enum):
    """User fields the listing can be ordered by."""

    NAME = "name"
    ID = "id"


class ListingQuery(BaseModel):
    """Validated listing parameters."""

    model_config = ConfigDict(frozen=True)

    page: int = Field(default=settings.DEFAULT_PAGE, ge=1, description="Page number (starting from 1)")
    size: int = Field(
        default=settings.DEFAULT_PAGE_SIZE,
        ge=1,
        le=settings.MAX_PAGE_SIZE,
        description="Items per page (at most MAX_PAGE_SIZE)",
    )
    sort: Optional[SortField] = Field(default=None, description="Field to sort by")

    @property
    def offset(self) -> int:
        """Index of the first item on the requested page."""
        return (self.page - 1) * self.size


class PagingLinks(BaseModel):
    """Link-style paging metadata returned alongside a page of users."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "totalResults": 50,
                "previous": "http://localhost:8000/api/v1/users?page=1&size=10&sort=name",
                "next": "http://localhost:8000/api/v1/users?page=3&size=10&sort=name",
            }
        },
    )

    total_results: int = Field(..., alias="totalResults", description="Total number of users")
    previous: Optional[str] = Field(None, description="URL of the previous page")
    next: Optional[str] = Field(None, description="URL of the next page")

    def to_response(self) -> dict:
        """Serialize with camelCase keys, omitting absent links."""
        return self.model_dump(by_alias=True, exclude_none=True)


class UserListResponse(BaseModel):
    """Body of the user listing endpoint."""

    data: list[User] = Field(..., description="Users on the requested page")
    paging: PagingLinks = Field(..., description="Paging metadata")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "data": [{"id": 2, "name": "Andrew"}, {"id": 0, "name": "Jorn"}],
                "paging": {
                    "totalResults": 50,
                    "next": "http://localhost:8000/api/v1/users?page=2&size=2&sort=name",
                },
            }
        }
    )
