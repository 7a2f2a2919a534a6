"""Derived views over the ledger.

Every function here is pure and recomputes its result from the list it is
given; nothing is cached between calls.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Dict, Iterable, List, Optional
from dateutil.relativedelta import relativedelta
from models.budget import Budget
from models.transaction import Transaction, INCOME, EXPENSE

ZERO = Decimal("0")

# Months offered for selection before today's month
PRECEDING_MONTHS = 11

SORT_ORDERS = ("newest", "oldest", "highest", "lowest")


@dataclass(frozen=True, order=True)
class Period:
    """A calendar month of a given year, e.g. March 2024.

    Two dates are in the same period iff their year and month match.
    Ordering follows the calendar.
    """

    year: int
    month: int

    @classmethod
    def of(cls, day: date) -> "Period":
        return cls(day.year, day.month)

    @classmethod
    def current(cls) -> "Period":
        return cls.of(date.today())

    @classmethod
    def parse(cls, text: str) -> "Period":
        """Parse a period label.

        Accepts "March 2024", "Mar 2024", "2024-03" and "2024/03".

        Raises:
            ValueError: If the text matches none of the formats.
        """
        text = text.strip()
        for fmt in ("%B %Y", "%b %Y", "%Y-%m", "%Y/%m"):
            try:
                parsed = datetime.strptime(text, fmt)
            except ValueError:
                continue
            return cls(parsed.year, parsed.month)
        raise ValueError(f"Unrecognized period: {text!r} (expected e.g. 'March 2024')")

    @property
    def start(self) -> date:
        """First day of the period."""
        return date(self.year, self.month, 1)

    @property
    def label(self) -> str:
        """Month name and year in the current locale, e.g. "March 2024"."""
        return self.start.strftime("%B %Y")

    def shift(self, months: int) -> "Period":
        return Period.of(self.start + relativedelta(months=months))

    def __str__(self) -> str:
        return self.label


@dataclass
class Totals:
    income: Decimal
    expense: Decimal

    @property
    def balance(self) -> Decimal:
        return self.income - self.expense


@dataclass
class CategoryShare:
    category: str
    amount: Decimal
    percentage: float


@dataclass
class MonthlyTotals:
    period: Period
    income: Decimal
    expense: Decimal


@dataclass
class BudgetOverview:
    total_budgeted: Decimal
    total_spent: Decimal
    budgets: List[Budget]

    @property
    def total_remaining(self) -> Decimal:
        return self.total_budgeted - self.total_spent

    @property
    def over_budget(self) -> List[Budget]:
        return [b for b in self.budgets if b.spent > b.amount]


def filter_by_period(
    transactions: Iterable[Transaction], period: Optional[Period] = None
) -> List[Transaction]:
    """Get the transactions dated within a period.

    Args:
        transactions: Transactions to filter.
        period: Period to keep. Defaults to the current month.

    Returns:
        Matching transactions, in their original order.
    """
    if period is None:
        period = Period.current()
    return [t for t in transactions if Period.of(t.date) == period]


def search_transactions(
    transactions: Iterable[Transaction], term: Optional[str]
) -> List[Transaction]:
    """Get transactions whose description or category contains ``term``.

    Matching ignores case. An empty or missing term keeps everything.
    """
    if not term:
        return list(transactions)
    needle = term.lower()
    return [
        t
        for t in transactions
        if needle in t.description.lower() or needle in t.category.lower()
    ]


def sort_transactions(
    transactions: Iterable[Transaction], order: str = "newest"
) -> List[Transaction]:
    """Sort transactions by date or amount.

    Args:
        transactions: Transactions to sort.
        order: One of SORT_ORDERS. Ties keep their input order.

    Raises:
        ValueError: If the order is unknown.
    """
    if order not in SORT_ORDERS:
        raise ValueError(
            f"Unknown sort order: {order!r} (expected one of {', '.join(SORT_ORDERS)})"
        )
    if order in ("newest", "oldest"):
        return sorted(transactions, key=lambda t: t.date, reverse=order == "newest")
    return sorted(transactions, key=lambda t: t.amount, reverse=order == "highest")


def totals(transactions: Iterable[Transaction]) -> Totals:
    """Sum income and expense amounts separately."""
    income = ZERO
    expense = ZERO
    for t in transactions:
        if t.type == INCOME:
            income += t.amount
        elif t.type == EXPENSE:
            expense += t.amount
    return Totals(income=income, expense=expense)


def category_breakdown(transactions: Iterable[Transaction]) -> List[CategoryShare]:
    """Group expenses by category with each category's share of the total.

    Income is ignored. Percentages are 0 when there are no expenses.

    Returns:
        One CategoryShare per category, largest amount first.
    """
    by_category: Dict[str, Decimal] = defaultdict(lambda: ZERO)
    for t in transactions:
        if t.type == EXPENSE:
            by_category[t.category] += t.amount

    grand_total = sum(by_category.values(), ZERO)
    shares = [
        CategoryShare(
            category=category,
            amount=amount,
            percentage=float(amount / grand_total * 100) if grand_total else 0.0,
        )
        for category, amount in by_category.items()
    ]
    shares.sort(key=lambda share: share.amount, reverse=True)
    return shares


def monthly_series(transactions: Iterable[Transaction]) -> List[MonthlyTotals]:
    """Sum income and expenses per period across all transactions.

    Returns:
        One MonthlyTotals per period that has transactions, oldest first.
    """
    series: Dict[Period, MonthlyTotals] = {}
    for t in transactions:
        period = Period.of(t.date)
        if period not in series:
            series[period] = MonthlyTotals(period=period, income=ZERO, expense=ZERO)
        if t.type == INCOME:
            series[period].income += t.amount
        elif t.type == EXPENSE:
            series[period].expense += t.amount

    return [series[period] for period in sorted(series)]


def available_periods(
    transactions: Iterable[Transaction], today: Optional[date] = None
) -> List[Period]:
    """Get the periods to offer for selection.

    This is today's period, the 11 calendar months before it, and the period
    of every transaction.

    Args:
        transactions: Transactions whose periods are included.
        today: Reference date. Defaults to today.

    Returns:
        Distinct periods, most recent first.
    """
    if today is None:
        today = date.today()

    current = Period.of(today)
    periods = {current}
    for i in range(1, PRECEDING_MONTHS + 1):
        periods.add(current.shift(-i))
    for t in transactions:
        periods.add(Period.of(t.date))

    return sorted(periods, reverse=True)


def previous_period(periods: List[Period], current: Period) -> Optional[Period]:
    """Get the period just older than ``current`` in a most-recent-first list.

    Returns None at the oldest period or when ``current`` is not listed.
    """
    if current not in periods:
        return None
    index = periods.index(current)
    if index >= len(periods) - 1:
        return None
    return periods[index + 1]


def next_period(periods: List[Period], current: Period) -> Optional[Period]:
    """Get the period just newer than ``current`` in a most-recent-first list.

    Returns None at the newest period or when ``current`` is not listed.
    """
    if current not in periods:
        return None
    index = periods.index(current)
    if index <= 0:
        return None
    return periods[index - 1]


def budget_overview(budgets: Iterable[Budget]) -> BudgetOverview:
    """Summarize budgeted and spent amounts across budgets."""
    budgets = list(budgets)
    return BudgetOverview(
        total_budgeted=sum((b.amount for b in budgets), ZERO),
        total_spent=sum((b.spent for b in budgets), ZERO),
        budgets=budgets,
    )
