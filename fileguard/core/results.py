#!/usr/bin/env python3
"""
Access Result Data Transfer Object

Every accessor operation returns an AccessResult instead of raising: either
a value, or an AccessError naming the failure kind.

Copyright (C) 2025 Marc Rivero Lopez
Licensed under the GNU General Public License v3.0 (GPLv3)
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .errors import AccessError, ErrorKind

T = TypeVar("T")


@dataclass(frozen=True)
class AccessResult(Generic[T]):
    """
    Outcome of one accessor operation.

    Attributes:
        value: Operation payload (handle, buffer, byte count, text, length)
        error: The failure, None on success
        count: Bytes transferred by the operation, where one took place
    """

    value: T | None = None
    error: AccessError | None = None
    count: int = 0

    @classmethod
    def success(cls, value: T, count: int = 0) -> "AccessResult[T]":
        return cls(value=value, count=count)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, value: Any = None) -> "AccessResult[T]":
        return cls(value=value, error=AccessError(kind, message))

    @classmethod
    def from_error(cls, error: AccessError, value: Any = None) -> "AccessResult[T]":
        return cls(value=value, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        return self.error.kind if self.error else None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> T:
        """
        Return the value of a successful result.

        Raises:
            ValueError: If the result is a failure
        """
        if self.error is not None:
            raise ValueError(f"Cannot unwrap failed result: {self.error}")
        return self.value  # type: ignore[return-value]

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"ok": self.ok, "count": self.count}
        if self.error is not None:
            result["error"] = self.error.to_dict()
        return result


__all__ = ["AccessResult"]
