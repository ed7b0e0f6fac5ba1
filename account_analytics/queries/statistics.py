"""
Account Statistics

Pure query functions over a list of accounts: partitioning, grouping,
sorting, summing and finding the richest holder.

DESIGN DECISION: Every function here is a single linear pass (or a sort)
over its input. Nothing is mutated, nothing is logged, nothing is raised
for empty input. `None` is accepted wherever a list is, and means the
same thing as an empty list.
"""

from decimal import Decimal
from typing import Callable, Iterable, Optional

from account_analytics.models.account import (
    Account,
    BalanceTotal,
    RichestAccount,
    Sex,
)


TieBreaker = Callable[[Account, Account], Account]


class UnknownTieBreakerError(ValueError):
    """Raised when a tie-break policy name is not registered."""
    pass


# =============================================================================
# TIE-BREAK POLICIES
# =============================================================================

def by_lowest_id(left: Account, right: Account) -> Account:
    """Keep the account with the lower id. On equal ids the right one wins."""
    if left.id < right.id:
        return left
    return right


def by_last_name(left: Account, right: Account) -> Account:
    """Keep the account whose last name sorts first. On equal names the right one wins."""
    if left.last_name < right.last_name:
        return left
    return right


TIE_BREAKERS: dict[str, TieBreaker] = {
    "lowest_id": by_lowest_id,
    "last_name": by_last_name,
}


def get_tie_breaker(name: str) -> TieBreaker:
    """Look up a registered tie-break policy by name."""
    try:
        return TIE_BREAKERS[name]
    except KeyError:
        raise UnknownTieBreakerError(
            f"Unknown tie-break policy: {name}. Known: {sorted(TIE_BREAKERS)}"
        ) from None


# =============================================================================
# QUERIES
# =============================================================================

def partition_by_sex(accounts: Optional[Iterable[Account]]) -> dict[bool, list[Account]]:
    """
    Split accounts into male (True) and female (False) buckets.

    A key is only present when at least one account of that sex exists,
    so empty input gives an empty dict. Input order is kept per bucket.
    """
    partitioned: dict[bool, list[Account]] = {}
    for account in accounts or ():
        partitioned.setdefault(account.sex == Sex.MALE, []).append(account)
    return partitioned


def group_by_email_domain(accounts: Optional[Iterable[Account]]) -> dict[str, list[Account]]:
    """
    Group accounts by the part of their email after the first '@'.

    Accounts whose email has no '@' are skipped.
    """
    grouped: dict[str, list[Account]] = {}
    for account in accounts or ():
        domain = account.email_domain
        if domain is None:
            continue
        grouped.setdefault(domain, []).append(account)
    return grouped


def sort_by_name(accounts: Optional[Iterable[Account]]) -> list[Account]:
    """Return a new list ordered by last name, then first name."""
    return sorted(accounts or (), key=lambda a: (a.last_name, a.first_name))


def total_balance(accounts: Optional[Iterable[Account]]) -> BalanceTotal:
    """Sum all balances exactly. `present` is False for empty input."""
    total = Decimal("0")
    present = False
    for account in accounts or ():
        total += account.balance
        present = True
    return BalanceTotal(total=total, present=present)


def find_richest(
    accounts: Optional[Iterable[Account]],
    merge: Optional[TieBreaker] = None,
) -> RichestAccount:
    """
    Find the account with the highest balance.

    Scans left to right. A strictly higher balance replaces the current
    best; an equal balance is handed to merge(best, candidate) and its
    result becomes the best. Without a merge function, by_lowest_id is used.

    Ties are resolved pairwise in scan order, so a three-way tie makes two
    merge calls and a non-associative merge can depend on input order.
    """
    if merge is None:
        merge = by_lowest_id

    best: Optional[Account] = None
    for candidate in accounts or ():
        if best is None or candidate.balance > best.balance:
            best = candidate
        elif candidate.balance == best.balance:
            best = merge(best, candidate)

    if best is None:
        return RichestAccount()
    return RichestAccount(account=best, present=True)
