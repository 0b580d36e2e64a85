# application/outcome.py
from dataclasses import dataclass
from typing import Any, Generic, Optional, TypeVar

from domain.trace import Trace

G = TypeVar("G")


@dataclass(frozen=True)
class InteractionResult(Generic[G]):
    goal: G
    trace: Trace


@dataclass(frozen=True)
class Completion:
    ok: bool
    error: Optional[BaseException] = None

    @classmethod
    def finished(cls) -> "Completion":
        return cls(ok=True)

    @classmethod
    def failure(cls, error: BaseException) -> "Completion":
        return cls(ok=False, error=error)
