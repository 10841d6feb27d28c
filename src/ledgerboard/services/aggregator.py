"""Ledger aggregator: balances, category totals, budget progress and report series.

Every function is a pure query over the collections passed in. Inputs are
never mutated, nothing is cached between calls, and unknown ids or empty
inputs produce zero / empty results instead of errors.
"""

from collections import defaultdict
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Optional

from ledgerboard.core.dates import (
    add_days,
    end_of_month,
    end_of_week,
    end_of_year,
    iter_month_starts,
    month_key,
    shift_months,
    start_of_month,
    start_of_week,
    start_of_year,
)
from ledgerboard.core.formatters import format_month_label
from ledgerboard.domain.models import (
    Account,
    Budget,
    BudgetPeriod,
    Category,
    CategoryType,
    DateRange,
    Transaction,
    TransactionFilter,
    TransactionType,
)
from ledgerboard.domain.snapshot import DEFAULT_ACCOUNT_COLOR
from ledgerboard.domain.views import (
    AccountBalanceSeries,
    BalancePoint,
    BudgetProgress,
    CashFlowSummary,
    CategoryShare,
    MonthlyBucket,
    TimeRange,
)

ZERO = Decimal("0")
HUNDRED = Decimal("100")
PERCENT_QUANTUM = Decimal("0.01")

DEFAULT_SAMPLE_DAYS = 15


# =============================================================================
# BALANCES
# =============================================================================


def account_balance(account_id: str, transactions: Iterable[Transaction]) -> Decimal:
    """
    Net ledger movement for an account (excluding its initial balance).

    +amount for income, -amount for expense, -amount for a transfer leaving
    the account and +amount for a transfer arriving at it.
    """
    return sum((t.balance_effect(account_id) for t in transactions), ZERO)


def current_balance(account: Account, transactions: Iterable[Transaction]) -> Decimal:
    """Displayed balance: initial balance plus all ledger movement."""
    return account.initial_balance + account_balance(account.id, transactions)


def balance_deltas(transactions: Iterable[Transaction]) -> dict[str, Decimal]:
    """Net ledger movement for every account referenced by the transactions, in one pass."""
    deltas: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for txn in transactions:
        _apply(deltas, txn)
    return dict(deltas)


def current_balances(
    accounts: Iterable[Account],
    transactions: Iterable[Transaction],
) -> dict[str, Decimal]:
    """Displayed balance per account id."""
    deltas = balance_deltas(transactions)
    return {a.id: a.initial_balance + deltas.get(a.id, ZERO) for a in accounts}


def total_balance(accounts: Iterable[Account], transactions: Iterable[Transaction]) -> Decimal:
    """Sum of displayed balances over the given accounts."""
    return sum(current_balances(accounts, transactions).values(), ZERO)


def _apply(balances: dict[str, Decimal], txn: Transaction) -> None:
    """Apply one transaction to a running balance map (mutates only ``balances``)."""
    if txn.type == TransactionType.INCOME:
        balances[txn.account_id] = balances[txn.account_id] + txn.amount
    else:
        balances[txn.account_id] = balances[txn.account_id] - txn.amount
    if txn.is_transfer and txn.target_account_id:
        balances[txn.target_account_id] = balances[txn.target_account_id] + txn.amount


# =============================================================================
# CATEGORY TOTALS AND BUDGETS
# =============================================================================


def category_total(
    category_id: str,
    transactions: Iterable[Transaction],
    period: Optional[DateRange] = None,
) -> Decimal:
    """
    Sum of transaction magnitudes in a category, optionally within a period.

    Direction is not applied: this is a spend (or earn) magnitude, not a net.
    """
    total = ZERO
    for txn in transactions:
        if txn.category_id != category_id:
            continue
        if period is not None and not period.contains(txn.date):
            continue
        total += txn.amount
    return total


def budget_window(period: BudgetPeriod, now: datetime) -> DateRange:
    """
    Current calendar window for a budget period, relative to ``now``.

    weekly: Sunday 00:00 through Saturday end of day
    monthly: first through last day of the current month
    yearly: Jan 1 through Dec 31 of the current year
    """
    period = BudgetPeriod(period)
    if period == BudgetPeriod.WEEKLY:
        return DateRange(start=start_of_week(now), end=end_of_week(now))
    if period == BudgetPeriod.YEARLY:
        return DateRange(start=start_of_year(now), end=end_of_year(now))
    return DateRange(start=start_of_month(now), end=end_of_month(now))


def budget_progress(
    budget: Budget,
    transactions: Iterable[Transaction],
    now: datetime,
) -> BudgetProgress:
    """
    Spend against a budget in its current window.

    progress_percent is clamped to 100 for display; is_over_budget compares
    the unclamped values (strictly greater). A zero cap counts as over budget
    as soon as anything is spent (progress 100), otherwise 0%.
    """
    window = budget_window(budget.period, now)
    spent = category_total(budget.category_id, transactions, window)
    cap = budget.amount
    is_over = spent > cap

    used_percent: Optional[Decimal] = None
    if cap > ZERO:
        ratio = spent / cap * HUNDRED
        used_percent = ratio.quantize(PERCENT_QUANTUM)
        progress = min(HUNDRED, ratio).quantize(PERCENT_QUANTUM)
    else:
        progress = (HUNDRED if is_over else ZERO).quantize(PERCENT_QUANTUM)

    return BudgetProgress(
        budget_id=budget.id,
        category_id=budget.category_id,
        amount=cap,
        spent=spent,
        window=window,
        progress_percent=progress,
        used_percent=used_percent,
        is_over_budget=is_over,
        remaining=ZERO if is_over else cap - spent,
        over_amount=spent - cap if is_over else ZERO,
    )


# =============================================================================
# FILTERING
# =============================================================================


def filter_transactions(
    transactions: Iterable[Transaction],
    report_filter: TransactionFilter,
) -> list[Transaction]:
    """
    Keep transactions matching every criterion of the filter.

    Date bounds are inclusive. No ordering is imposed beyond the input order.
    """
    needle = report_filter.search.strip().lower() if report_filter.search else ""
    result = []
    for txn in transactions:
        if report_filter.date_range is not None and not report_filter.date_range.contains(txn.date):
            continue
        if report_filter.account_ids and txn.account_id not in report_filter.account_ids:
            continue
        if report_filter.category_ids and txn.category_id not in report_filter.category_ids:
            continue
        if txn.type not in report_filter.transaction_types:
            continue
        if needle and needle not in txn.description.lower():
            continue
        result.append(txn)
    return result


def sort_newest_first(transactions: Iterable[Transaction]) -> list[Transaction]:
    return sorted(transactions, key=lambda t: t.date, reverse=True)


def recent_transactions(transactions: Iterable[Transaction], limit: int = 5) -> list[Transaction]:
    """The ``limit`` most recent transactions, newest first."""
    return sort_newest_first(transactions)[: max(0, limit)]


def cash_flow_summary(transactions: Iterable[Transaction]) -> CashFlowSummary:
    """Total income, total expenses and net flow. Transfers only count toward transaction_count."""
    summary = CashFlowSummary()
    for txn in transactions:
        summary.transaction_count += 1
        if txn.type == TransactionType.INCOME:
            summary.total_income += txn.amount
        elif txn.type == TransactionType.EXPENSE:
            summary.total_expenses += txn.amount
    return summary


# =============================================================================
# REPORT SERIES
# =============================================================================


def _as_zone_of(moment: datetime, reference: datetime) -> datetime:
    if moment.tzinfo is not None and reference.tzinfo is not None:
        return moment.astimezone(reference.tzinfo)
    return moment


def monthly_income_expense(
    transactions: Iterable[Transaction],
    date_range: DateRange,
) -> list[MonthlyBucket]:
    """
    Income and expense totals per calendar month, in chronological order.

    Every month touched by the range gets a bucket, including months with no
    data. Transfers and transactions outside the range are ignored.
    """
    if date_range.is_empty:
        return []

    buckets: dict[str, MonthlyBucket] = {}
    for month_start in iter_month_starts(date_range.start, date_range.end):
        key = month_key(month_start)
        buckets[key] = MonthlyBucket(key=key, label=format_month_label(month_start), start=month_start)

    for txn in transactions:
        if txn.is_transfer or not date_range.contains(txn.date):
            continue
        bucket = buckets.get(month_key(_as_zone_of(txn.date, date_range.start)))
        if bucket is None:
            continue
        if txn.type == TransactionType.INCOME:
            bucket.income += txn.amount
        else:
            bucket.expense += txn.amount

    return list(buckets.values())


def balance_sample_dates(
    date_range: DateRange,
    step_days: int = DEFAULT_SAMPLE_DAYS,
) -> list[datetime]:
    """Sample instants every ``step_days`` from the range start, plus the range end."""
    if step_days <= 0:
        raise ValueError(f"step_days must be positive, got {step_days}")
    if date_range.is_empty:
        return []

    dates = []
    current = date_range.start
    while current <= date_range.end:
        dates.append(current)
        current = add_days(current, step_days)
    if dates[-1] != date_range.end:
        dates.append(date_range.end)
    return dates


def balance_evolution(
    accounts: Iterable[Account],
    transactions: Iterable[Transaction],
    date_range: DateRange,
    step_days: int = DEFAULT_SAMPLE_DAYS,
) -> list[AccountBalanceSeries]:
    """
    Balance of each account at every sample instant of the range.

    Transactions are sorted once and replayed with a running balance per
    account; a single cursor advances through them as the sample instants
    move forward, so the cost is one sort plus one pass.
    """
    accounts = list(accounts)
    samples = balance_sample_dates(date_range, step_days)

    running: dict[str, Decimal] = defaultdict(lambda: ZERO)
    series: dict[str, AccountBalanceSeries] = {}
    for account in accounts:
        running[account.id] = account.initial_balance
        series[account.id] = AccountBalanceSeries(
            account_id=account.id,
            name=account.name,
            color=account.color or DEFAULT_ACCOUNT_COLOR,
            initial_balance=account.initial_balance,
        )

    ordered = sorted(transactions, key=lambda t: t.date)
    cursor = 0
    for sample in samples:
        while cursor < len(ordered) and ordered[cursor].date <= sample:
            _apply(running, ordered[cursor])
            cursor += 1
        for account_id, account_series in series.items():
            account_series.points.append(BalancePoint(date=sample, balance=running[account_id]))

    return list(series.values())


def category_distribution(
    transactions: Iterable[Transaction],
    categories: Iterable[Category],
    category_type: Optional[CategoryType] = None,
) -> list[CategoryShare]:
    """
    Share of each category in the total magnitude of the transactions.

    Only known categories (optionally of one type) with a positive total are
    returned, largest first.
    """
    known = {
        c.id: c
        for c in categories
        if category_type is None or c.type == CategoryType(category_type)
    }
    totals: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for txn in transactions:
        if txn.category_id in known:
            totals[txn.category_id] += txn.amount

    positive = [(cid, amount) for cid, amount in totals.items() if amount > ZERO]
    grand_total = sum((amount for _, amount in positive), ZERO)
    positive.sort(key=lambda item: (-item[1], known[item[0]].name))

    return [
        CategoryShare(
            category_id=cid,
            name=known[cid].name,
            color=known[cid].color,
            amount=amount,
            percentage=(amount / grand_total * HUNDRED).quantize(PERCENT_QUANTUM),
        )
        for cid, amount in positive
    ]


def preset_time_ranges(now: datetime) -> dict[str, TimeRange]:
    """Report period presets relative to ``now``."""
    this_month_start = start_of_month(now)
    last_month_start = shift_months(this_month_start, -1)
    return {
        "this_month": TimeRange("this_month", "This Month", this_month_start, end_of_month(now)),
        "last_month": TimeRange(
            "last_month", "Last Month", last_month_start, end_of_month(last_month_start)
        ),
        "this_week": TimeRange("this_week", "This Week", start_of_week(now), end_of_week(now)),
        "this_year": TimeRange("this_year", "This Year", start_of_year(now), end_of_year(now)),
        "custom": TimeRange("custom", "Custom", this_month_start, now),
    }
