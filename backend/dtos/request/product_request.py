"""
Product Request DTOs

DTOs for product listing requests.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional

from constants import PaginationDefaults


class ProductSpecParams(BaseModel):
    """
    Request DTO for the product listing.

    Normalizes untrusted query-string input before a specification is built:
    page_index must be at least 1, and page_size must be at least 1 and is
    clamped to PaginationDefaults.MAX_PAGE_SIZE. The same rules apply when a
    field is assigned after construction.
    """

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    sort: Optional[str] = Field(None, description="PriceAsc, PriceDesc, or anything else for name")
    brand_id: Optional[int] = Field(None, alias="brandId", description="Filter by brand id")
    type_id: Optional[int] = Field(None, alias="typeId", description="Filter by product type id")
    page_index: int = Field(
        PaginationDefaults.DEFAULT_PAGE_INDEX, alias="pageIndex", ge=1,
        description="1-based page number"
    )
    page_size: int = Field(
        PaginationDefaults.DEFAULT_PAGE_SIZE, alias="pageSize", ge=1,
        description=f"Rows per page (at most {PaginationDefaults.MAX_PAGE_SIZE})"
    )

    @field_validator("page_size")
    @classmethod
    def clamp_page_size(cls, v: int) -> int:
        """Cap page size at the maximum instead of rejecting it."""
        return min(v, PaginationDefaults.MAX_PAGE_SIZE)
