"""Command line interface entry point."""

from __future__ import annotations

import os
import sys

import click

from coveralls_uploader.configuration import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_ENV,
    SUPPORTED_ENVS,
    write_placeholder_configuration,
)
from coveralls_uploader.run_execution import RunExecutionError, RunRequest, execute_jobs_pipeline


class CliError(Exception):
    """Custom CLI error."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="coveralls-uploader")
def cli() -> None:
    """Coveralls Jobs API v1 uploader."""


@cli.command(name="init-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the configuration template to write",
)
def init_config(output_path: str) -> None:
    """Generate a commented .coveralls.yml with the documented defaults."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="jobs")
@click.option(
    "--config",
    "-c",
    "config_path",
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help=".coveralls.yml path, relative to the root directory",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Do not send json_file to Jobs API.",
)
@click.option(
    "--env",
    "-e",
    "env",
    default=DEFAULT_ENV,
    show_default=True,
    type=click.Choice(SUPPORTED_ENVS, case_sensitive=False),
    help="Runtime environment name",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    default=False,
    help="Report each step of the run.",
)
@click.option(
    "--root-dir",
    "root_dir",
    default=".",
    show_default=True,
    type=click.Path(file_okay=False, path_type=str),
    help="Project root directory",
)
def jobs(config_path: str, dry_run: bool, env: str, verbose: bool, root_dir: str) -> None:
    """Collect coverage and submit it to the Coveralls Jobs API."""
    try:
        execute_jobs_pipeline(
            RunRequest(
                config_path=config_path,
                root_dir=root_dir,
                dry_run=dry_run,
                verbose=verbose,
                env=env,
            ),
            environ=dict(os.environ),
        )
    except RunExecutionError as exc:
        raise CliError(str(exc), exc.exit_code) from exc


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
