# src/sonar_review/review/runner.py
import logging
from typing import Protocol
from sonar_review.models.finding import Finding
from sonar_review.models.review import RunSummary
from sonar_review.publishers.base import Publisher
from .enricher import Enricher


logger = logging.getLogger(__name__)


class FindingSource(Protocol):
    async def fetch_findings(self) -> list[Finding]: ...


class ReviewRunner:
    def __init__(self, source: FindingSource, enricher: Enricher, publisher: Publisher):
        self.source = source
        self.enricher = enricher
        self.publisher = publisher

    async def run(self) -> RunSummary:
        """Fetch findings, then enrich and publish them one at a time.

        A failed fetch propagates; per-finding failures are already
        contained by the enricher and the publisher.
        """
        summary = RunSummary()

        logger.info("Fetching SonarQube issues...")
        findings = await self.source.fetch_findings()
        logger.info(f"Found {len(findings)} issues in SonarQube")

        if not findings:
            logger.info("No issues found! Code looks clean.")
            return summary

        total = len(findings)
        for index, finding in enumerate(findings, start=1):
            logger.info(f"Processing issue {index}/{total}: {finding.rule} in {finding.file_path}")

            comment = await self.enricher.enrich(finding)
            if comment.fallback:
                summary.fallbacks += 1
            else:
                summary.enriched += 1

            outcome = await self.publisher.publish(comment, finding)
            if outcome.published:
                summary.published += 1
            else:
                summary.publish_failures += 1

            summary.processed += 1

        await self.publisher.finish(summary)
        logger.info(
            f"Review complete: {summary.processed} processed, {summary.enriched} enriched, "
            f"{summary.fallbacks} fallbacks, {summary.publish_failures} publish failures"
        )
        return summary
