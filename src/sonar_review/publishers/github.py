# src/sonar_review/publishers/github.py
import logging
from sonar_review.models.finding import Finding
from sonar_review.models.review import EnrichedComment, PublishOutcome, RunSummary
from sonar_review.platforms.github import GitHubClient
from .base import Publisher


logger = logging.getLogger(__name__)


class GitHubReviewPublisher(Publisher):
    """Posts each enriched comment inline on a pull request."""

    def __init__(self, github: GitHubClient, owner: str, repo: str, pull_number: int, commit_sha: str):
        self.github = github
        self.owner = owner
        self.repo = repo
        self.pull_number = pull_number
        self.commit_sha = commit_sha

    async def publish(self, comment: EnrichedComment, finding: Finding) -> PublishOutcome:
        path = finding.file_path
        # File-level findings are anchored to the first line
        line = finding.line or 1
        logger.info(f"Comment for {path}:{line}: {comment.text}")

        try:
            await self.github.create_review_comment(
                owner=self.owner,
                repo=self.repo,
                pull_number=self.pull_number,
                commit_id=self.commit_sha,
                body=comment.text,
                path=path,
                line=line,
            )
        except Exception as e:
            logger.error(f"Failed to post comment on {path}:{line}: {e}")
            return PublishOutcome(published=False, error=str(e))

        return PublishOutcome(published=True)

    async def finish(self, summary: RunSummary) -> None:
        logger.info(
            f"Posted {summary.published} review comments on "
            f"{self.owner}/{self.repo}#{self.pull_number} ({summary.publish_failures} failed)"
        )
