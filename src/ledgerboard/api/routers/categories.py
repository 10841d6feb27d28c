"""Category management endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from ledgerboard.api.deps import get_ledger_service
from ledgerboard.api.schemas import (
    CategoryCreateRequest,
    CategoryListResponse,
    CategoryResponse,
)
from ledgerboard.domain.models import Category, CategoryType
from ledgerboard.services import CategoryCreate, LedgerService

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("", response_model=CategoryListResponse)
def list_categories(
    type: Optional[CategoryType] = Query(None, description="Only income or expense categories"),
    ledger: LedgerService = Depends(get_ledger_service),
) -> CategoryListResponse:
    """List categories, optionally of one type."""
    categories = [
        CategoryResponse.model_validate(c)
        for c in ledger.list_categories()
        if type is None or c.type == type
    ]
    return CategoryListResponse(categories=categories, count=len(categories))


@router.post("", response_model=CategoryResponse, status_code=201)
def create_category(
    request: CategoryCreateRequest,
    ledger: LedgerService = Depends(get_ledger_service),
) -> CategoryResponse:
    """Create a new category or subcategory."""
    category = ledger.add_category(CategoryCreate(**request.model_dump()))
    return CategoryResponse.model_validate(category)


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(
    category_id: str,
    ledger: LedgerService = Depends(get_ledger_service),
) -> CategoryResponse:
    """Get category by ID."""
    return CategoryResponse.model_validate(ledger.get_category(category_id))


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: str,
    request: CategoryCreateRequest,
    ledger: LedgerService = Depends(get_ledger_service),
) -> CategoryResponse:
    """Replace a category's fields."""
    category = ledger.update_category(Category(id=category_id, **request.model_dump()))
    return CategoryResponse.model_validate(category)


@router.delete("/{category_id}", status_code=204)
def delete_category(
    category_id: str,
    ledger: LedgerService = Depends(get_ledger_service),
) -> Response:
    """Delete a category; its subcategories become top-level."""
    ledger.delete_category(category_id)
    return Response(status_code=204)
