"""Outcome record: success value or a tagged failure with its origin."""
from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class FailureKind(str, Enum):
    RETRIEVAL = "retrieval"
    GENERATION = "generation"
    SEARCH = "search"


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    message: str
    path: str | None = None
    status_code: int | None = None

    def as_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"kind": self.kind.value, "message": self.message}
        if self.path is not None:
            out["path"] = self.path
        if self.status_code is not None:
            out["status_code"] = self.status_code
        return out


class OutcomeError(Exception):
    """Raised by entry points to re-signal a failed outcome to the caller."""

    def __init__(self, failure: Failure) -> None:
        super().__init__(failure.message)
        self.failure = failure


@dataclass(frozen=True)
class Outcome(Generic[T]):
    value: T | None = None
    failure: Failure | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failed(cls, failure: Failure) -> "Outcome[T]":
        return cls(failure=failure)

    def unwrap(self) -> T:
        if self.failure is not None:
            raise OutcomeError(self.failure)
        return self.value  # type: ignore[return-value]
