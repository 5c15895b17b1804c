from .product_command_service import ProductCommandService
from .product_query_service import ProductQueryService

__all__ = [
    "ProductCommandService",
    "ProductQueryService",
]
