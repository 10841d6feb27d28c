"""Pydantic schemas for category endpoints."""

from typing import Optional

from pydantic import BaseModel, Field

from ledgerboard.domain.models.enums import CategoryType
from ledgerboard.domain.snapshot import DEFAULT_CATEGORY_COLOR


class CategoryCreateRequest(BaseModel):
    """Request schema for creating or replacing a category."""

    name: str = Field(..., max_length=255)
    type: CategoryType
    color: str = Field(default=DEFAULT_CATEGORY_COLOR, max_length=20)
    parent_id: Optional[str] = Field(default=None, description="Top-level parent category")
    icon: Optional[str] = Field(default=None, max_length=50)


class CategoryResponse(BaseModel):
    """Response schema for a single category."""

    model_config = {"from_attributes": True}

    id: str
    name: str
    type: CategoryType
    color: str
    parent_id: Optional[str] = None
    icon: Optional[str] = None


class CategoryListResponse(BaseModel):
    categories: list[CategoryResponse]
    count: int
