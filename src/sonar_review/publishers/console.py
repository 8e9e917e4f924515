import click
from sonar_review.models.finding import Finding
from sonar_review.models.review import EnrichedComment, PublishOutcome, RunSummary
from .base import Publisher


SEPARATOR = "=" * 80


class ConsolePublisher(Publisher):
    """Prints one report block per finding to stdout."""

    async def publish(self, comment: EnrichedComment, finding: Finding) -> PublishOutcome:
        click.echo(SEPARATOR)
        click.echo(f"File: {finding.file_path}")
        click.echo(f"Line: {finding.line_label}")
        click.echo(f"Severity: {finding.severity}")
        click.echo(f"Rule: {finding.rule}")
        click.echo(f"Original Message: {finding.message}")
        click.echo("")
        click.echo("Enhanced Review:")
        click.echo(comment.text)
        click.echo("")
        return PublishOutcome(published=True)

    async def finish(self, summary: RunSummary) -> None:
        click.echo(SEPARATOR)
        click.echo(f"Review complete! Processed {summary.processed} issues.")
