"""Account query package."""

from account_analytics.queries.executor import AccountQueryExecutor, QueryExecutionError
from account_analytics.queries.statistics import (
    TIE_BREAKERS,
    TieBreaker,
    UnknownTieBreakerError,
    by_last_name,
    by_lowest_id,
    find_richest,
    get_tie_breaker,
    group_by_email_domain,
    partition_by_sex,
    sort_by_name,
    total_balance,
)

__all__ = [
    "AccountQueryExecutor",
    "QueryExecutionError",
    "TIE_BREAKERS",
    "TieBreaker",
    "UnknownTieBreakerError",
    "by_last_name",
    "by_lowest_id",
    "find_richest",
    "get_tie_breaker",
    "group_by_email_domain",
    "partition_by_sex",
    "sort_by_name",
    "total_balance",
]
