"""
Query Execution Engine

Runs a structured AccountQuery against a fixed list of accounts and
packages the answer as a serializable QueryResult.

DESIGN DECISION: The executor owns everything the pure functions in
statistics.py do not: configuration, logging and turning failures into
a result. Queries never raise out of execute().
"""

from typing import Optional, Sequence

from account_analytics.audit import AuditLogger
from account_analytics.config import AnalyticsSettings, get_settings
from account_analytics.models.account import (
    Account,
    AccountQuery,
    QueryResult,
    QueryType,
)
from account_analytics.models.audit import AuditEventBuilder
from account_analytics.queries.statistics import (
    TieBreaker,
    find_richest,
    get_tie_breaker,
    group_by_email_domain,
    partition_by_sex,
    sort_by_name,
    total_balance,
)


class QueryExecutionError(Exception):
    """Error during query execution."""
    pass


class AccountQueryExecutor:
    """
    Executes structured queries against an in-memory account list.

    GUARANTEES:
    - The account list is never mutated
    - Money in results is rendered as exact decimal strings
    - Clear "no data found" when the list is empty
    """

    def __init__(
        self,
        accounts: Optional[Sequence[Account]],
        settings: Optional[AnalyticsSettings] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._accounts = list(accounts or ())
        self._settings = settings or get_settings()
        self._audit = audit_logger or AuditLogger()

    def execute(self, query: AccountQuery) -> QueryResult:
        """Execute a structured query and return its result."""
        self._audit.log(AuditEventBuilder.query_received(
            query_id=query.query_id,
            query_type=query.query_type.value,
            account_count=len(self._accounts),
        ))

        try:
            if query.query_type == QueryType.PARTITION_BY_SEX:
                result = self._execute_partition(query)
            elif query.query_type == QueryType.GROUP_BY_EMAIL_DOMAIN:
                result = self._execute_group(query)
            elif query.query_type == QueryType.SORT_BY_NAME:
                result = self._execute_sort(query)
            elif query.query_type == QueryType.TOTAL_BALANCE:
                result = self._execute_total(query)
            elif query.query_type == QueryType.FIND_RICHEST:
                result = self._execute_richest(query)
            else:
                raise QueryExecutionError(f"Unsupported query type: {query.query_type}")

        except Exception as e:
            self._audit.log(AuditEventBuilder.query_failed(
                query_id=query.query_id,
                query_type=query.query_type.value,
                error_message=str(e),
            ))
            return QueryResult(
                query_id=query.query_id,
                success=False,
                error_message=str(e),
                data_found=False,
                result_count=0,
                query_description=f"Query failed: {str(e)}",
            )

        self._audit.log(AuditEventBuilder.query_executed(
            query_id=query.query_id,
            query_type=query.query_type.value,
            result_count=result.result_count,
        ))
        return result

    def _execute_partition(self, query: AccountQuery) -> QueryResult:
        partitioned = partition_by_sex(self._accounts)
        groups = {
            ("male" if is_male else "female"): [a.id for a in bucket]
            for is_male, bucket in partitioned.items()
        }
        count = sum(len(bucket) for bucket in partitioned.values())

        return QueryResult(
            query_id=query.query_id,
            success=True,
            data_found=count > 0,
            result_count=count,
            groups=groups,
            query_description="Partitioning accounts by sex",
        )

    def _execute_group(self, query: AccountQuery) -> QueryResult:
        grouped = group_by_email_domain(self._accounts)
        groups = {domain: [a.id for a in bucket] for domain, bucket in grouped.items()}
        count = sum(len(bucket) for bucket in grouped.values())

        return QueryResult(
            query_id=query.query_id,
            success=True,
            data_found=count > 0,
            result_count=count,
            groups=groups,
            query_description=f"Grouping accounts by email domain ({len(groups)} domains)",
        )

    def _execute_sort(self, query: AccountQuery) -> QueryResult:
        limit = query.limit or self._settings.max_result_rows
        ordered = sort_by_name(self._accounts)[:limit]

        return QueryResult(
            query_id=query.query_id,
            success=True,
            data_found=len(ordered) > 0,
            result_count=len(ordered),
            results=[a.to_result_dict() for a in ordered],
            query_description=f"Listing accounts by last name, first name (limit {limit})",
        )

    def _execute_total(self, query: AccountQuery) -> QueryResult:
        total = total_balance(self._accounts)

        if not total.present:
            return QueryResult(
                query_id=query.query_id,
                success=True,
                data_found=False,
                result_count=0,
                query_description="No accounts found for total balance",
            )

        return QueryResult(
            query_id=query.query_id,
            success=True,
            data_found=True,
            result_count=len(self._accounts),
            aggregation_result={
                "total_balance": str(total.total),
                "account_count": len(self._accounts),
            },
            query_description="Calculating total balance",
        )

    def _execute_richest(self, query: AccountQuery) -> QueryResult:
        policy = query.tie_break or self._settings.default_tie_break
        merge = self._audited_tie_breaker(query, policy, get_tie_breaker(policy))
        richest = find_richest(self._accounts, merge)

        if not richest.present:
            return QueryResult(
                query_id=query.query_id,
                success=True,
                data_found=False,
                result_count=0,
                query_description="No accounts found for richest lookup",
            )

        return QueryResult(
            query_id=query.query_id,
            success=True,
            data_found=True,
            result_count=1,
            results=[richest.account.to_result_dict()],
            aggregation_result={
                "balance": str(richest.account.balance),
                "tie_break": policy,
            },
            query_description=f"Finding richest account (ties resolved by {policy})",
        )

    def _audited_tie_breaker(
        self,
        query: AccountQuery,
        policy: str,
        merge: TieBreaker,
    ) -> TieBreaker:
        """Wrap a tie-break policy so every resolved tie is logged."""
        def audited(left: Account, right: Account) -> Account:
            winner = merge(left, right)
            self._audit.log(AuditEventBuilder.tie_break_applied(
                query_id=query.query_id,
                policy=policy,
                left_id=left.id,
                right_id=right.id,
                winner_id=winner.id,
            ))
            return winner

        return audited
