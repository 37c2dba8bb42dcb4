"""lcov-report CLI."""

from pathlib import Path

import click

from lcovreport import __version__
from lcovreport.cli.comment import comment_command
from lcovreport.cli.render import render_command
from lcovreport.config.loader import load_config
from lcovreport.core.errors import ConfigError
from lcovreport.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="lcov-report")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="YAML config file (default: ./.lcovreport.yaml if present)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """Summarize lcov coverage tracefiles and publish them on pull requests."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        raise click.ClickException(e.message) from e

    logging_config = config.logging
    if verbose:
        logging_config = logging_config.model_copy(update={"level": "DEBUG"})
    configure_logging(config=logging_config)

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config"] = config


cli.add_command(render_command, name="render")
cli.add_command(comment_command, name="comment")


if __name__ == "__main__":
    cli()
