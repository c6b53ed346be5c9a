"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Builds the resolution engine lazily so ``--help`` and
``--version`` never touch the temp area, and centralizes result output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scssimporter.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from scssimporter.config.settings import ImporterSettings
    from scssimporter.infrastructure.workspace import TempArea
    from scssimporter.services.importer import ScssImporter
    from scssimporter.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: ImporterSettings) -> None:
        self.settings = settings
        self._importer: ScssImporter | None = None

        from scssimporter.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def temp_area(self) -> TempArea:
        from scssimporter.infrastructure.workspace import TempArea

        return TempArea(self.settings.tmp_dir)

    def importer(self, *, reset_tmp: bool = True) -> ScssImporter:
        """The importer for this invocation, created on first use.

        With *reset_tmp* the temp area is wiped first, as a fresh
        compilation process would do.
        """
        if self._importer is None:
            from scssimporter.services.importer import ScssImporter
            from scssimporter.services.resolver import ResolutionEngine

            temp_area = self.temp_area
            if reset_tmp:
                temp_area.reset()
            engine = ResolutionEngine(
                temp_area,
                project_root=self.settings.project_root,
                package_dirs=self.settings.package_dirs,
            )
            self._importer = ScssImporter(engine)
        return self._importer

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout, warnings on stderr (JSON mode carries them inline).
        * Failure: stderr, exit code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
