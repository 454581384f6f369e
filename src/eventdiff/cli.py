"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from eventdiff.configuration import (
    DEFAULT_OWNERS_PATH,
    DEFAULT_POLICY_PATH,
    load_ownership_map,
    load_policy_configuration,
)
from eventdiff.results_writing import render_console_report, write_report_workbook
from eventdiff.revision_access import GitRevisionSource, RevisionAccessError
from eventdiff.run_execution import RunRequest, execute_schema_gate_run
from eventdiff.run_execution.run_contracts import DEFAULT_SCHEMA_DIR
from eventdiff.schema_diff import Decision

EXIT_PASS = 0
EXIT_BLOCKED = 1


class CliError(Exception):
    """Custom CLI error."""


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="eventdiff")
@click.option("--base", required=True, help="Base revision to compare from (e.g. a commit SHA)")
@click.option("--head", required=True, help="Head revision to compare to (e.g. a commit SHA)")
@click.option(
    "--dir",
    "directory",
    default=DEFAULT_SCHEMA_DIR,
    show_default=True,
    help="Repository directory holding the event schema files",
)
@click.option(
    "--repo",
    "repo_path",
    default=".",
    show_default=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Git working tree that policy and owner paths are relative to",
)
@click.option(
    "--policy",
    "policy_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Severity policy file [default: <repo>/{DEFAULT_POLICY_PATH.as_posix()}]",
)
@click.option(
    "--owners",
    "owners_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help=f"Event ownership file [default: <repo>/{DEFAULT_OWNERS_PATH.as_posix()}]",
)
@click.option(
    "--report-xlsx",
    "report_xlsx",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional path for an Excel copy of the run report",
)
@click.option("--verbose", is_flag=True, default=False, help="Log debug details to stderr.")
@click.pass_context
def cli(
    ctx: click.Context,
    base: str,
    head: str,
    directory: str,
    repo_path: Path,
    policy_path: Path | None,
    owners_path: Path | None,
    report_xlsx: Path | None,
    verbose: bool,
) -> None:
    """Classify event schema changes between two revisions and gate breaking ones."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )
    policy = load_policy_configuration(policy_path or repo_path / DEFAULT_POLICY_PATH)
    ownership = load_ownership_map(owners_path or repo_path / DEFAULT_OWNERS_PATH)
    try:
        report = execute_schema_gate_run(
            RunRequest(base=base, head=head, directory=directory),
            source=GitRevisionSource(repo_path),
            policy=policy,
            ownership=ownership,
        )
    except RevisionAccessError as exc:
        raise CliError(str(exc)) from exc

    for line in render_console_report(report):
        click.echo(line)
    if report_xlsx is not None:
        try:
            write_report_workbook(report, report_xlsx)
        except OSError as exc:
            raise CliError(f"Failed to write report workbook: {exc}") from exc
    ctx.exit(EXIT_BLOCKED if report.decision is Decision.FAIL else EXIT_PASS)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        exit_code = cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return exit_code if isinstance(exit_code, int) else 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
