# src/sonar_review/main.py
import asyncio
import logging
import sys
from typing import NoReturn

import click
from pydantic import ValidationError

from sonar_review import __version__
from sonar_review.config import PUBLISHERS, ConfigurationMissing, Settings
from sonar_review.platforms.github import GitHubClient
from sonar_review.providers.azure_openai import AzureOpenAIProvider
from sonar_review.publishers.base import Publisher
from sonar_review.publishers.console import ConsolePublisher
from sonar_review.publishers.github import GitHubReviewPublisher
from sonar_review.review.enricher import Enricher
from sonar_review.review.runner import ReviewRunner
from sonar_review.sources.sonarqube import SonarQubeClient, SourceUnavailable


logger = logging.getLogger(__name__)


def get_publisher(settings: Settings, publisher: str) -> Publisher:
    """Build the publisher strategy selected by configuration."""
    if publisher == "github":
        owner, repo = settings.repository
        return GitHubReviewPublisher(
            github=GitHubClient(
                token=settings.github_token,
                base_url=settings.github_api_url,
                timeout=settings.http_timeout,
            ),
            owner=owner,
            repo=repo,
            pull_number=int(settings.pr_number),
            commit_sha=settings.github_sha,
        )
    return ConsolePublisher()


def build_runner(settings: Settings, publisher: str) -> ReviewRunner:
    source = SonarQubeClient(
        base_url=settings.sonarqube_url,
        project_key=settings.sonarqube_project,
        token=settings.sonarqube_token,
        timeout=settings.http_timeout,
    )
    provider = AzureOpenAIProvider(
        api_key=settings.azure_openai_api_key,
        endpoint=settings.openai_endpoint,
        deployment=settings.azure_openai_deployment,
        api_version=settings.azure_openai_api_version,
        timeout=settings.http_timeout,
    )
    enricher = Enricher(
        provider=provider,
        max_tokens=settings.max_tokens,
        retries=settings.enrich_retries,
        base_delay_ms=settings.retry_base_delay_ms,
    )
    return ReviewRunner(source=source, enricher=enricher, publisher=get_publisher(settings, publisher))


def config_error(heading: str, names: list[str]) -> NoReturn:
    click.echo(f"Configuration error: {heading}", err=True)
    for name in names:
        click.echo(f"   - {name}", err=True)
    click.echo("\nPlease create a .env file with these variables.", err=True)
    sys.exit(1)


@click.command()
@click.option("--publisher", type=click.Choice(PUBLISHERS), default=None,
              help="Where to send enriched comments (overrides PUBLISHER).")
@click.option("--env-file", default=".env", show_default=True,
              help="Optional dotenv file with configuration.")
@click.option("--verbose", is_flag=True, default=False,
              help="Enable debug logging.")
@click.version_option(__version__, prog_name="sonar-review")
def cli(publisher: str | None, env_file: str, verbose: bool) -> None:
    """Explain SonarQube issues with an LLM and report them or post them on a PR."""
    try:
        settings = Settings(_env_file=env_file)
    except ValidationError as e:
        config_error(
            "Invalid environment variables:",
            [f"{str(err['loc'][0]).upper()} ({err['msg']})" for err in e.errors()],
        )

    publisher = publisher or settings.publisher

    logging.basicConfig(level=logging.DEBUG if verbose else settings.log_level)

    try:
        settings.require(publisher)
    except ConfigurationMissing as e:
        config_error("Missing required environment variables:", e.missing)

    logger.info(f"Azure endpoint: {settings.openai_endpoint}")

    try:
        runner = build_runner(settings, publisher)
        asyncio.run(runner.run())
    except SourceUnavailable as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    except Exception as e:
        logger.exception(f"Review run failed: {e}")
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
