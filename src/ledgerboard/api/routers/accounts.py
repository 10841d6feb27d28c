"""Account management endpoints."""

from fastapi import APIRouter, Depends, Response

from ledgerboard.api.deps import get_ledger_service
from ledgerboard.api.schemas import (
    AccountCreateRequest,
    AccountListResponse,
    AccountResponse,
)
from ledgerboard.domain.models import Account
from ledgerboard.services import AccountCreate, LedgerService
from ledgerboard.services import aggregator

router = APIRouter(prefix="/accounts", tags=["accounts"])


def _to_response(account: Account, ledger: LedgerService) -> AccountResponse:
    response = AccountResponse.model_validate(account)
    response.current_balance = aggregator.current_balance(
        account, ledger.snapshot().transactions
    )
    return response


@router.get("", response_model=AccountListResponse)
def list_accounts(
    ledger: LedgerService = Depends(get_ledger_service),
) -> AccountListResponse:
    """List all accounts with their current balances."""
    snapshot = ledger.snapshot()
    balances = aggregator.current_balances(snapshot.accounts, snapshot.transactions)
    accounts = []
    for account in snapshot.accounts:
        response = AccountResponse.model_validate(account)
        response.current_balance = balances[account.id]
        accounts.append(response)
    return AccountListResponse(
        accounts=accounts,
        total_balance=sum(balances.values(), aggregator.ZERO),
        count=len(accounts),
    )


@router.post("", response_model=AccountResponse, status_code=201)
def create_account(
    request: AccountCreateRequest,
    ledger: LedgerService = Depends(get_ledger_service),
) -> AccountResponse:
    """Create a new account."""
    account = ledger.add_account(AccountCreate(**request.model_dump()))
    return _to_response(account, ledger)


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: str,
    ledger: LedgerService = Depends(get_ledger_service),
) -> AccountResponse:
    """Get account by ID."""
    return _to_response(ledger.get_account(account_id), ledger)


@router.put("/{account_id}", response_model=AccountResponse)
def update_account(
    account_id: str,
    request: AccountCreateRequest,
    ledger: LedgerService = Depends(get_ledger_service),
) -> AccountResponse:
    """Replace an account's fields."""
    account = ledger.update_account(Account(id=account_id, **request.model_dump()))
    return _to_response(account, ledger)


@router.delete("/{account_id}", status_code=204)
def delete_account(
    account_id: str,
    ledger: LedgerService = Depends(get_ledger_service),
) -> Response:
    """Delete an account. Its transactions are kept and reported as "Unknown Account"."""
    ledger.delete_account(account_id)
    return Response(status_code=204)
