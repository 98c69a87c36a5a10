"""Success/Failure result union returned across component boundaries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from share_app.domain.failures import AppFailure

T = TypeVar("T")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T


@dataclass(frozen=True)
class Failure:
    failure: AppFailure

    @property
    def message(self) -> str:
        return self.failure.message


Result = Success[T] | Failure

