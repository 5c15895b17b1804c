from .slug import MAX_SLUG_LENGTH, generate_slug

__all__ = [
    "MAX_SLUG_LENGTH",
    "generate_slug",
]
