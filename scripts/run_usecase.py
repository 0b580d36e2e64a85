#!/usr/bin/env python3
"""
Usecase interaction script

Usage:
  python scripts/run_usecase.py <usecase-file> [--user <id>] [--max-depth <n>]
  python scripts/run_usecase.py <usecase-id> [--usecases-dir <dir>] [--user <id>]

Examples:
  python scripts/run_usecase.py usecases/sign_in.yaml
  python scripts/run_usecase.py post_article --user alice

Exit codes: 0 = goal reached, 1 = load error / system failure, 2 = not authorized
"""
from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import Optional

from application.interactor.scenario_interactor import ScenarioInteractor
from application.ports.logger import LoggerPort
from application.services.definition_scenario import DefinitionScenario
from domain.actor import Actor
from domain.exceptions import NotAuthorizedError, RobustiveError, ValidationError
from domain.usecase import UsecaseDefinition
from infrastructure.config.env_settings import EnvSettingsProvider, InteractorSettings
from infrastructure.logging.console_logger import ConsoleLogger
from infrastructure.logging.log_setup import setup_console_logging
from infrastructure.logging.loguru_logger import LoguruLogger
from infrastructure.reporting.logger_reporter import LoggerReporter
from infrastructure.usecase.base_loader import UsecaseLoadError
from infrastructure.usecase.file_finder import UsecaseFileFinder
from infrastructure.usecase.loader_registry import UsecaseLoaderRegistry


USECASES_DIR = Path(__file__).parent.parent / "usecases"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NOT_AUTHORIZED = 2


def build_logger(settings: InteractorSettings) -> LoggerPort:
    if settings.logger == "console":
        return ConsoleLogger()
    setup_console_logging(level=settings.log_level)
    return LoguruLogger()


def build_interactor(settings: InteractorSettings, max_depth: Optional[int] = None) -> ScenarioInteractor:
    logger = build_logger(settings)
    return ScenarioInteractor(
        logger=logger,
        reporter=LoggerReporter(logger),
        max_depth=max_depth if max_depth is not None else settings.max_depth,
    )


def resolve_usecase_path(target: str, usecases_dir: Path) -> Path:
    path = Path(target)
    if path.suffix:
        return path
    found = UsecaseFileFinder(usecases_dir).find_by_id(target)
    if found is None:
        raise UsecaseLoadError(f"Usecase not found: {target} (searched {usecases_dir})")
    return found


def load_definition(path: Path) -> UsecaseDefinition:
    loader = UsecaseLoaderRegistry().get_loader(path)
    return loader.load_from_file(str(path))


def _parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run one usecase interaction")
    parser.add_argument("usecase", help="Usecase file path or usecase id")
    parser.add_argument("--usecases-dir", default=str(USECASES_DIR), help="Directory searched for usecase ids")
    parser.add_argument("--user", default=None, help="Signed-in user id (omit for an anonymous actor)")
    parser.add_argument("--max-depth", type=int, default=None, help="Maximum number of steps")
    return parser.parse_args(argv)


def main(argv: Optional[list] = None) -> None:
    args = _parse_args(argv)

    try:
        settings = EnvSettingsProvider().get()
        path = resolve_usecase_path(args.usecase, Path(args.usecases_dir))
        definition = load_definition(path)
        interactor = build_interactor(settings, max_depth=args.max_depth)
    except (UsecaseLoadError, ValidationError, ValueError) as e:
        print(f"ERROR: {e}")
        sys.exit(EXIT_FAILURE)

    scenario = DefinitionScenario(definition)
    actor: Actor[str] = Actor(user=args.user)

    print(f"=== Usecase: {definition.name} ({actor.user_type.value}) ===")
    try:
        result = asyncio.run(interactor.interact(scenario, definition.start, actor))
    except NotAuthorizedError as e:
        print(f"NOT AUTHORIZED: {e}")
        sys.exit(EXIT_NOT_AUTHORIZED)
    except RobustiveError as e:
        print(f"FAILED: {e}")
        sys.exit(EXIT_FAILURE)

    for i, scene in enumerate(result.trace):
        print(f"  {i}. {scene}")
    print(f"Goal: {result.goal}")
    sys.exit(EXIT_OK)


if __name__ == "__main__":
    main()
