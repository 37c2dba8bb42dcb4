"""lcov-report comment command - publish the report on a pull request."""

import os
from pathlib import Path

import click
import structlog
from pydantic import ValidationError

from lcovreport.cli.utils import get_config, load_records, pr_number_from_event, resolve_lcov_path
from lcovreport.config.models import GitHubConfig
from lcovreport.core.errors import ConfigError, PublishError
from lcovreport.coverage.report import build_comment_body
from lcovreport.publish.github import GitHubCommentPublisher

logger = structlog.get_logger()


@click.command()
@click.argument(
    "lcov_path",
    required=False,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--repo",
    "repository",
    envvar="GITHUB_REPOSITORY",
    help="Repository as owner/name [env: GITHUB_REPOSITORY]",
)
@click.option(
    "--pr",
    "pr_number",
    type=click.IntRange(min=1),
    help="Pull request number (default: config, then GITHUB_EVENT_PATH)",
)
@click.option("--token", envvar="GITHUB_TOKEN", help="API token [env: GITHUB_TOKEN]")
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on malformed directives instead of skipping them",
)
@click.pass_context
def comment_command(
    ctx: click.Context,
    lcov_path: Path | None,
    repository: str | None,
    pr_number: int | None,
    token: str | None,
    strict: bool,
) -> None:
    """Create or update the coverage comment on a pull request.

    An earlier comment carrying the configured marker is edited in place;
    otherwise a new comment is posted.
    """
    config = get_config(ctx)

    pr_number = (
        pr_number
        or config.github.pr_number
        or pr_number_from_event(os.environ.get("GITHUB_EVENT_PATH"))
    )
    if pr_number is None:
        logger.warning("comment.skipped", reason="Not a PR, skipping comment.")
        return

    overrides = {"repository": repository, "token": token, "pr_number": pr_number}
    try:
        github = GitHubConfig.model_validate(
            {**config.github.model_dump(), **{k: v for k, v in overrides.items() if v}}
        )
    except ValidationError as e:
        err = e.errors()[0]
        field = "github." + ".".join(str(loc) for loc in err["loc"])
        raise click.ClickException(
            ConfigError.invalid_value(field, err.get("input"), err["msg"]).message
        ) from e
    if not github.repository:
        raise click.ClickException(ConfigError.missing_required("github.repository").message)
    if not github.token:
        raise click.ClickException(ConfigError.missing_required("github.token").message)

    records = load_records(resolve_lcov_path(lcov_path, config), strict=strict)
    body = build_comment_body(records, title=config.report.title, marker=config.report.marker)

    with GitHubCommentPublisher(
        github.repository,
        github.token,
        api_url=github.api_url,
        timeout=github.timeout_sec,
    ) as publisher:
        try:
            result = publisher.upsert_comment(pr_number, body, config.report.marker)
        except PublishError as e:
            raise click.ClickException(str(e)) from e

    click.echo(f"Comment {result.action}: {result.html_url or result.comment_id}")
