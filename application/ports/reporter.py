# application/ports/reporter.py
from __future__ import annotations

from abc import ABC, abstractmethod

from application.services.describer import Description
from domain.exceptions import RobustiveError


class ReporterPort(ABC):
    @abstractmethod
    def completed(self, description: Description) -> None:
        ...

    @abstractmethod
    def failed(self, description: Description, error: RobustiveError) -> None:
        ...
