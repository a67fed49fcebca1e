"""
Explicit outcome type for the best-effort fetch steps.

A failed fetch is logged and degraded rather than raised; FetchResult keeps
"nothing found" and "could not fetch" apart for the caller.
"""
from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass
class FetchResult(Generic[T]):
    """Items from one fetch plus whether the fetch itself succeeded."""
    items: List[T] = field(default_factory=list)
    ok: bool = True
    error: Optional[str] = None

    @classmethod
    def success(cls, items: List[T]) -> "FetchResult[T]":
        return cls(items=list(items), ok=True)

    @classmethod
    def failure(cls, error: Exception) -> "FetchResult[T]":
        return cls(items=[], ok=False, error=str(error))

    @property
    def failed(self) -> bool:
        return not self.ok

    @property
    def is_empty(self) -> bool:
        """True for a successful fetch that found nothing."""
        return self.ok and not self.items

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)
