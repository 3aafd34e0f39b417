"""AppContext — the object Click passes to every subcommand.

The root group builds one per invocation from :class:`TrainSettings`.
Commands hand it a service coroutine; it runs the coroutine, prints the
ServiceResult, and sets the exit status.
"""

from __future__ import annotations

import asyncio
from collections.abc import Coroutine
from typing import TYPE_CHECKING, Any

import click

from trainctl.config.logging import configure_logging
from trainctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from trainctl.config.settings import TrainSettings
    from trainctl.infrastructure.repositories.interfaces import TrainingRepository
    from trainctl.services.result import ServiceResult
    from trainctl.services.training import TrainingService


class AppContext:
    """Per-invocation state: settings, the storage backend, output flags.

    The repository is opened on first use, so ``--help``, ``--version``
    and usage errors never create a database file.
    """

    def __init__(self, settings: TrainSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        self._repository: TrainingRepository | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def repository(self) -> TrainingRepository:
        if self._repository is None:
            self._repository = self._open_repository()
        return self._repository

    def _open_repository(self) -> TrainingRepository:
        if self.settings.storage.backend == "memory":
            from trainctl.infrastructure.repositories.memory import InMemoryTrainingRepository

            return InMemoryTrainingRepository()

        from trainctl.infrastructure.database.engine import init_database
        from trainctl.infrastructure.repositories.sql import SqlTrainingRepository

        return SqlTrainingRepository(init_database(self.settings.data_dir))

    @property
    def service(self) -> TrainingService:
        from trainctl.services.training import TrainingService

        return TrainingService(self.repository, lifecycle_config=self.settings.lifecycle)

    def run(self, call: Coroutine[Any, Any, ServiceResult]) -> None:
        """Drive *call* on a fresh event loop, then :meth:`emit` its result."""
        self.emit(asyncio.run(call))

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and exit 1 if it failed.

        Success goes to stdout, failure to stderr. Warnings go to stderr
        too, except in JSON mode where the payload already carries them.
        """
        click.echo(format_result(result, settings=self.output), err=not result.ok)
        if not result.ok:
            raise SystemExit(1)
        if not self.output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
