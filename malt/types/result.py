"""Success-or-diagnostic wrapper threaded through the reader and evaluator.

Every stage returns a Result instead of raising, so an error never unwinds
through the evaluator: callers test `is_error` and hand the failed Result
straight back up. `unwrap()` is the escape hatch for code that would rather
have the carried MaltError raised.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, TYPE_CHECKING

from malt.types.errors import MaltError

if TYPE_CHECKING:
    from malt.reader.lexer import Token

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """Exactly one of `value` / `error` is populated."""

    value: Optional[T] = None
    error: Optional[MaltError] = None

    @classmethod
    def ok(cls, value: T) -> Result[T]:
        return cls(value=value)

    @classmethod
    def fail(cls, error: MaltError) -> Result[T]:
        return cls(error=error)

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @property
    def message(self) -> str:
        return self.error.message if self.error is not None else ""

    @property
    def token(self) -> Optional[Token]:
        return self.error.token if self.error is not None else None

    def unwrap(self) -> T:
        """Return the produced value, or raise the carried error."""
        if self.error is not None:
            raise self.error
        return self.value

    def __repr__(self) -> str:
        if self.error is not None:
            return f"Result.fail({type(self.error).__name__}({self.error.message!r}))"
        return f"Result.ok({self.value!r})"
