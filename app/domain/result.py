"""
Tagged results returned by validators and repositories.

A call either succeeds with ``Ok(value)`` or fails with ``Err(failure)``.
Callers branch on the variant instead of catching exceptions; the error
normalizer turns a ``Failure`` into an HTTP message and status.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, Optional, Tuple, TypeVar, Union

T = TypeVar("T")


class FailureKind(str, Enum):
    """Classification of a failed operation"""
    VALIDATION = "validation"
    DUPLICATE_KEY = "duplicate_key"
    UNCLASSIFIED = "unclassified"


@dataclass(frozen=True)
class ValidationIssue:
    """One problem found in an input payload"""
    path: Tuple[str, ...]
    message: str


@dataclass(frozen=True)
class Failure:
    """A classified failure with kind-specific detail"""
    kind: FailureKind
    issues: Tuple[ValidationIssue, ...] = ()
    detail: Optional[str] = field(default=None, compare=False)

    @classmethod
    def validation(cls, issues) -> "Failure":
        return cls(kind=FailureKind.VALIDATION, issues=tuple(issues))

    @classmethod
    def duplicate_key(cls, detail: Optional[str] = None) -> "Failure":
        return cls(kind=FailureKind.DUPLICATE_KEY, detail=detail)

    @classmethod
    def unclassified(cls, detail: Optional[str] = None) -> "Failure":
        return cls(kind=FailureKind.UNCLASSIFIED, detail=detail)


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True)
class Err:
    failure: Failure


Result = Union[Ok[Any], Err]
