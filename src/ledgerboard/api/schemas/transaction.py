"""Pydantic schemas for transaction endpoints."""

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from ledgerboard.domain.models import Transaction, TransactionType
from ledgerboard.domain.snapshot import LedgerSnapshot


class TransactionCreateRequest(BaseModel):
    """Request schema for creating a transaction."""

    account_id: str = Field(..., description="Source account ID")
    category_id: str = Field(default="", description="Category ID")
    amount: Decimal = Field(..., description="Non-negative magnitude")
    type: TransactionType
    description: str = Field(default="", max_length=500)
    date: Optional[datetime] = Field(
        default=None,
        description="Transaction time (configured timezone); defaults to now",
    )
    target_account_id: Optional[str] = Field(
        default=None,
        description="Destination account (required for transfers)",
    )
    tags: list[str] = Field(default_factory=list)


class TransactionUpdateRequest(TransactionCreateRequest):
    """Request schema for replacing a transaction; a missing date keeps the current one."""


class TransactionResponse(BaseModel):
    """Response schema for a single transaction."""

    id: str
    account_id: str
    account_name: str
    category_id: str
    category_name: str
    amount: Decimal
    type: TransactionType
    description: str
    date: datetime
    target_account_id: Optional[str] = None
    target_account_name: Optional[str] = None
    tags: list[str] = Field(default_factory=list)


class TransactionListResponse(BaseModel):
    """Response schema for listing transactions."""

    transactions: list[TransactionResponse]
    count: int


def transaction_response(transaction: Transaction, snapshot: LedgerSnapshot) -> TransactionResponse:
    """Build a response with account and category names resolved from the snapshot."""
    return TransactionResponse(
        id=transaction.id,
        account_id=transaction.account_id,
        account_name=snapshot.account_name(transaction.account_id),
        category_id=transaction.category_id,
        category_name=snapshot.category_name(transaction.category_id),
        amount=transaction.amount,
        type=transaction.type,
        description=transaction.description,
        date=transaction.date,
        target_account_id=transaction.target_account_id,
        target_account_name=(
            snapshot.account_name(transaction.target_account_id)
            if transaction.target_account_id
            else None
        ),
        tags=list(transaction.tags),
    )
