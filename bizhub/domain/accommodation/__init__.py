from .slug import unique_slug

__all__ = [
    "unique_slug",
]
