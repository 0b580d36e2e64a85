# infrastructure/reporting/logger_reporter.py
from __future__ import annotations

from dataclasses import dataclass

from application.ports.logger import LoggerPort
from application.ports.reporter import ReporterPort
from application.services.describer import Description
from domain.exceptions import RobustiveError


@dataclass(frozen=True)
class LoggerReporter(ReporterPort):
    """Writes one audit event per finished interaction."""
    logger: LoggerPort

    def completed(self, description: Description) -> None:
        self.logger.info(
            "usecase.completed",
            usecase=description.usecase,
            actor=description.actor,
            steps=list(description.steps),
            audit=description.render(),
        )

    def failed(self, description: Description, error: RobustiveError) -> None:
        self.logger.error(
            "usecase.failed",
            usecase=description.usecase,
            actor=description.actor,
            steps=list(description.steps),
            error_type=type(error).__name__,
            audit=description.render_failure(error),
        )
