"""Pydantic schemas for account endpoints."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ledgerboard.domain.models.enums import AccountType


class AccountCreateRequest(BaseModel):
    """Request schema for creating or replacing an account."""

    name: str = Field(..., max_length=255, description="Display name")
    type: AccountType = Field(default=AccountType.BANK, description="Account type")
    currency: str = Field(default="USD", max_length=10, description="ISO currency code")
    initial_balance: Decimal = Field(default=Decimal("0"), description="Opening balance")
    color: Optional[str] = Field(default=None, max_length=20)
    icon: Optional[str] = Field(default=None, max_length=50)

    @field_validator("currency")
    @classmethod
    def uppercase_currency(cls, v: str) -> str:
        return v.upper()


class AccountResponse(BaseModel):
    """Response schema for a single account."""

    model_config = {"from_attributes": True}

    id: str
    name: str
    type: AccountType
    currency: str
    initial_balance: Decimal
    color: Optional[str] = None
    icon: Optional[str] = None
    current_balance: Optional[Decimal] = None


class AccountListResponse(BaseModel):
    """Response schema for listing accounts."""

    accounts: list[AccountResponse]
    total_balance: Decimal
    count: int
