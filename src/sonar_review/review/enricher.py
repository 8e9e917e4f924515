# src/sonar_review/review/enricher.py
import logging
from sonar_review.models.finding import Finding
from sonar_review.models.review import EnrichedComment
from sonar_review.providers.base import LLMProvider
from sonar_review.retry import with_retry
from .prompts import build_enrich_prompt


logger = logging.getLogger(__name__)


class Enricher:
    def __init__(
        self,
        provider: LLMProvider,
        max_tokens: int = 200,
        retries: int = 2,
        base_delay_ms: int = 500,
    ):
        self.provider = provider
        self.max_tokens = max_tokens
        self.retries = retries
        self.base_delay_ms = base_delay_ms

    async def enrich(self, finding: Finding) -> EnrichedComment:
        """Explain a finding via the LLM, falling back to its original message."""
        prompt = build_enrich_prompt(finding)

        try:
            text = await with_retry(
                lambda: self.provider.complete(prompt, max_tokens=self.max_tokens),
                retries=self.retries,
                base_delay_ms=self.base_delay_ms,
            )
        except Exception as e:
            logger.error(f"LLM enrichment failed for {finding.rule} in {finding.file_path}: {e}")
            return EnrichedComment(text=finding.message, fallback=True, error=str(e))

        return EnrichedComment(text=text.strip())
