"""
Application common module.

Contains the building blocks every service uses:
- Result: outcome wrapper with messages
- Pagination / PaginatedResult: page parameters and page results
- Specification / LambdaSpec / PredicateBuilder / Include: query descriptors
- RequestParameters: query-string shape of paged requests
"""

from .pagination import MAX_PAGE_SIZE, PaginatedResult, Pagination, paginate
from .request_parameters import RequestParameters
from .result import Result
from .specification import Include, LambdaSpec, PredicateBuilder, Specification

__all__ = [
    "MAX_PAGE_SIZE",
    "Include",
    "LambdaSpec",
    "PaginatedResult",
    "Pagination",
    "PredicateBuilder",
    "RequestParameters",
    "Result",
    "Specification",
    "paginate",
]
