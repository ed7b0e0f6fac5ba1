"""
Account Analytics - Source Package

Collection queries over account records: partition by sex, group by
email domain, sort by name, total balance and richest holder with a
pluggable tie-break.

DESIGN PRINCIPLES:
1. Queries are pure functions over an in-memory list
2. Money is Decimal, never float
3. "No data" is an explicit present flag, not an exception
"""

__version__ = "1.0.0"
__author__ = "Account Analytics Team"
