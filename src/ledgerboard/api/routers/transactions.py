"""Transaction management endpoints."""

from dataclasses import replace

from fastapi import APIRouter, Depends, Response

from ledgerboard.api.deps import get_ledger_service, get_report_filter, get_report_service
from ledgerboard.api.schemas import (
    TransactionCreateRequest,
    TransactionListResponse,
    TransactionResponse,
    TransactionUpdateRequest,
    transaction_response,
)
from ledgerboard.domain.models import TransactionFilter
from ledgerboard.services import LedgerService, ReportService, TransactionCreate

router = APIRouter(prefix="/transactions", tags=["transactions"])


@router.get("", response_model=TransactionListResponse)
def list_transactions(
    report_filter: TransactionFilter = Depends(get_report_filter),
    ledger: LedgerService = Depends(get_ledger_service),
    reports: ReportService = Depends(get_report_service),
) -> TransactionListResponse:
    """List transactions matching the filter, newest first."""
    snapshot = ledger.snapshot()
    transactions = reports.filtered_transactions(report_filter)
    return TransactionListResponse(
        transactions=[transaction_response(t, snapshot) for t in transactions],
        count=len(transactions),
    )


@router.post("", response_model=TransactionResponse, status_code=201)
def create_transaction(
    request: TransactionCreateRequest,
    ledger: LedgerService = Depends(get_ledger_service),
) -> TransactionResponse:
    """Record a new income, expense or transfer."""
    data = request.model_dump()
    data["tags"] = tuple(data["tags"])
    transaction = ledger.add_transaction(TransactionCreate(**data))
    return transaction_response(transaction, ledger.snapshot())


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: str,
    ledger: LedgerService = Depends(get_ledger_service),
) -> TransactionResponse:
    """Get transaction by ID."""
    return transaction_response(ledger.get_transaction(transaction_id), ledger.snapshot())


@router.put("/{transaction_id}", response_model=TransactionResponse)
def update_transaction(
    transaction_id: str,
    request: TransactionUpdateRequest,
    ledger: LedgerService = Depends(get_ledger_service),
) -> TransactionResponse:
    """Replace a transaction's fields."""
    existing = ledger.get_transaction(transaction_id)
    updated = replace(
        existing,
        account_id=request.account_id,
        category_id=request.category_id,
        amount=request.amount,
        type=request.type,
        description=request.description,
        date=request.date or existing.date,
        target_account_id=request.target_account_id,
        tags=tuple(request.tags),
    )
    transaction = ledger.update_transaction(updated)
    return transaction_response(transaction, ledger.snapshot())


@router.delete("/{transaction_id}", status_code=204)
def delete_transaction(
    transaction_id: str,
    ledger: LedgerService = Depends(get_ledger_service),
) -> Response:
    """Delete a transaction."""
    ledger.delete_transaction(transaction_id)
    return Response(status_code=204)
