"""
Result type for service outcomes.

The Result type carries success or failure explicitly, together with the
human-readable messages a caller should surface, without relying on
exceptions for expected failure paths (not found, validation, store errors).

Example:
    async def approve_async(self, advertisement_id: str) -> Result[None]:
        found = await self.repository.find_by_id_async(advertisement_id, True)
        if not found.succeeded:
            return found.cast()
        if found.data is None:
            return Result.fail("Advertisement not found.")
        ...
        return await self.repository.save_async()

    # Usage
    result = await service.approve_async(advertisement_id)
    if result.succeeded:
        print(result.messages)
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")  # Payload type
U = TypeVar("U")  # Mapped payload type


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of an operation.

    Attributes:
        succeeded: Whether the operation completed successfully
        messages: Human-readable messages, errors on failure
        data: Payload, only meaningful when succeeded is True
    """

    succeeded: bool
    messages: list[str] = field(default_factory=list)
    data: T | None = None

    @classmethod
    def success(
        cls,
        data: T | None = None,
        message: str | None = None,
        messages: Iterable[str] | None = None,
    ) -> "Result[T]":
        """Create a successful result."""
        collected = list(messages or [])
        if message:
            collected.append(message)
        return cls(succeeded=True, messages=collected, data=data)

    @classmethod
    def fail(cls, messages: str | Iterable[str]) -> "Result[Any]":
        """Create a failed result from one message or several."""
        if isinstance(messages, str):
            return cls(succeeded=False, messages=[messages])
        return cls(succeeded=False, messages=list(messages))

    @property
    def failed(self) -> bool:
        """Inverse of succeeded."""
        return not self.succeeded

    def unwrap(self) -> T:
        """Get the payload, raising ValueError on failure."""
        if not self.succeeded:
            raise ValueError(f"Cannot get data from failed result: {'; '.join(self.messages)}")
        return self.data  # type: ignore[return-value]

    def value_or(self, default: T) -> T:
        """Get the payload, or the default when failed or empty."""
        if not self.succeeded or self.data is None:
            return default
        return self.data

    def map(self, fn: Callable[[T], U]) -> "Result[U]":
        """Apply a function to the payload of a successful result."""
        if not self.succeeded:
            return self.cast()
        mapped = fn(self.data)  # type: ignore[arg-type]
        return Result(succeeded=True, messages=list(self.messages), data=mapped)

    def flat_map(self, fn: Callable[[T], "Result[U]"]) -> "Result[U]":
        """Apply a function returning a Result to the payload."""
        if not self.succeeded:
            return self.cast()
        return fn(self.data)  # type: ignore[arg-type]

    def cast(self) -> "Result[Any]":
        """Re-type a failed result so it can be returned from another operation."""
        return Result(succeeded=self.succeeded, messages=list(self.messages))

    def __repr__(self) -> str:
        state = "Success" if self.succeeded else "Failure"
        return f"{state}(messages={self.messages!r}, data={self.data!r})"
