# infrastructure/reporting/in_memory_reporter.py
from __future__ import annotations

from dataclasses import dataclass
from threading import Lock
from typing import List, Optional

from application.ports.reporter import ReporterPort
from application.services.describer import Description
from domain.exceptions import RobustiveError


@dataclass(frozen=True)
class ReportRecord:
    description: Description
    error: Optional[RobustiveError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def render(self) -> str:
        if self.error is None:
            return self.description.render()
        return self.description.render_failure(self.error)


class InMemoryReporter(ReporterPort):
    def __init__(self) -> None:
        self._records: List[ReportRecord] = []
        self._lock = Lock()

    def completed(self, description: Description) -> None:
        with self._lock:
            self._records.append(ReportRecord(description=description))

    def failed(self, description: Description, error: RobustiveError) -> None:
        with self._lock:
            self._records.append(ReportRecord(description=description, error=error))

    def list(self) -> List[ReportRecord]:
        with self._lock:
            return list(self._records)
