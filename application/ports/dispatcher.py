# application/ports/dispatcher.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable


class CompletionDispatcherPort(ABC):
    """Decides on which execution context completion callbacks run."""

    @abstractmethod
    def dispatch(self, callback: Callable[..., None], *args: Any) -> None:
        ...
