from .repository import RepositoryProtocol

__all__ = [
    "RepositoryProtocol",
]
