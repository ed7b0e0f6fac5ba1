"""
Core Data Models for Account Analytics

These models define the schemas for all data flowing through the library.
They are designed to:
1. Be immutable once constructed (queries only redistribute references)
2. Keep money exact (Decimal everywhere, never float)
3. Be serializable for query results and logging

DESIGN DECISION: "No data" is signalled with explicit result models
(RichestAccount, BalanceTotal) carrying a `present` flag, rather than
overloading None or an empty container.
"""

from datetime import date, datetime, timezone
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS
# =============================================================================

class Sex(str, Enum):
    """Sex of the account holder."""
    MALE = "male"
    FEMALE = "female"


class QueryType(str, Enum):
    """Queries the executor knows how to run."""
    PARTITION_BY_SEX = "partition_by_sex"
    GROUP_BY_EMAIL_DOMAIN = "group_by_email_domain"
    SORT_BY_NAME = "sort_by_name"
    TOTAL_BALANCE = "total_balance"
    FIND_RICHEST = "find_richest"


# =============================================================================
# ACCOUNT MODEL
# =============================================================================

class Account(BaseModel):
    """
    A single account record.

    Immutable: every query returns new containers holding the same
    Account instances it was given.

    The email is NOT validated. Records without an '@' are legal and are
    simply skipped when grouping by domain.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(
        ...,
        description="Account identifier (uniqueness is the caller's concern)"
    )
    first_name: str = Field(
        default="",
        description="Holder first name"
    )
    last_name: str = Field(
        default="",
        description="Holder last name"
    )
    email: str = Field(
        default="",
        description="Email address, expected as local@domain"
    )
    birthday: Optional[date] = None
    sex: Sex = Field(
        default=Sex.MALE,
        description="Holder sex"
    )
    creation_date: Optional[date] = None
    balance: Decimal = Field(
        default=Decimal("0"),
        description="Current balance, may be negative"
    )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def email_domain(self) -> Optional[str]:
        """Everything after the first '@', or None when there is no '@'."""
        local, sep, domain = self.email.partition("@")
        if not sep:
            return None
        return domain

    def to_result_dict(self) -> dict:
        """Convert to a dictionary for query results."""
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "birthday": self.birthday.isoformat() if self.birthday else None,
            "sex": self.sex.value,
            "creation_date": self.creation_date.isoformat() if self.creation_date else None,
            "balance": str(self.balance),
        }


# =============================================================================
# RESULT WRAPPERS
# =============================================================================

class RichestAccount(BaseModel):
    """Outcome of find_richest. `present` is False iff the input was empty."""
    model_config = ConfigDict(frozen=True)

    account: Optional[Account] = None
    present: bool = False


class BalanceTotal(BaseModel):
    """Outcome of total_balance. `total` is zero when nothing was summed."""
    model_config = ConfigDict(frozen=True)

    total: Decimal = Decimal("0")
    present: bool = False


# =============================================================================
# QUERY MODELS (for the executor)
# =============================================================================

class AccountQuery(BaseModel):
    """
    A structured request for one of the account queries.

    tie_break names a registered tie-break policy. When omitted the
    configured default policy is used.
    """

    query_id: UUID = Field(
        default_factory=uuid4
    )
    query_type: QueryType = Field(
        ...,
        description="Which query to run"
    )
    tie_break: Optional[str] = Field(
        default=None,
        description="Tie-break policy name for find_richest"
    )
    limit: Optional[int] = Field(
        default=None,
        ge=1,
        le=1000,
        description="Maximum rows returned by sort_by_name"
    )


class QueryResult(BaseModel):
    """
    Result of executing an AccountQuery.

    Money is rendered as strings so the values stay exact once serialized.
    """

    query_id: UUID
    executed_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    # Success/failure
    success: bool
    error_message: Optional[str] = None

    data_found: bool = Field(
        ...,
        description="Was any data found?"
    )
    result_count: int = Field(
        ge=0,
        description="Number of accounts the query touched"
    )

    results: list[dict] = Field(
        default_factory=list,
        description="Accounts as list of dicts"
    )
    groups: dict[str, list[int]] = Field(
        default_factory=dict,
        description="Group key to account ids, for partition/group queries"
    )
    aggregation_result: Optional[dict] = None

    query_description: str = Field(
        ...,
        description="Human-readable description of what was queried"
    )
