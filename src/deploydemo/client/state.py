from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class Phase(str, Enum):
    PENDING = "pending"
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class SectionState(Generic[T]):
    """
    Rendering state of one UI section: waiting, loaded, or failed to load.
    """

    phase: Phase
    payload: Optional[T] = None
    reason: Optional[str] = None

    @staticmethod
    def pending() -> "SectionState[T]":
        return SectionState(Phase.PENDING)

    @staticmethod
    def success(payload: T) -> "SectionState[T]":
        return SectionState(Phase.SUCCESS, payload=payload)

    @staticmethod
    def failure(reason: str) -> "SectionState[T]":
        return SectionState(Phase.FAILURE, reason=reason)

    @property
    def is_pending(self) -> bool:
        return self.phase is Phase.PENDING

    @property
    def is_success(self) -> bool:
        return self.phase is Phase.SUCCESS

    @property
    def is_failure(self) -> bool:
        return self.phase is Phase.FAILURE
