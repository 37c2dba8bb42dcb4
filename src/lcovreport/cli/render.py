"""lcov-report render command - print the report to stdout."""

from pathlib import Path

import click

from lcovreport.cli.utils import get_config, load_records, resolve_lcov_path
from lcovreport.coverage.report import build_comment_body, render_table, summarize


@click.command()
@click.argument(
    "lcov_path",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--section",
    type=click.Choice(["summary", "table", "body"]),
    default="body",
    show_default=True,
    help="Print only the totals, only the per-file table, or the full comment body",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on malformed directives instead of skipping them",
)
@click.pass_context
def render_command(ctx: click.Context, lcov_path: Path | None, section: str, strict: bool) -> None:
    """Render a coverage report from an lcov tracefile.

    LCOV_PATH defaults to report.lcov_path from the configuration.
    """
    config = get_config(ctx)
    records = load_records(resolve_lcov_path(lcov_path, config), strict=strict)

    if section == "summary":
        click.echo(summarize(records))
    elif section == "table":
        click.echo(render_table(records))
    else:
        click.echo(
            build_comment_body(records, title=config.report.title, marker=config.report.marker)
        )
