from abc import ABC, abstractmethod
from sonar_review.models.finding import Finding
from sonar_review.models.review import EnrichedComment, PublishOutcome, RunSummary


class Publisher(ABC):
    @abstractmethod
    async def publish(self, comment: EnrichedComment, finding: Finding) -> PublishOutcome:
        """Deliver one enriched comment. Must not raise."""
        pass

    async def finish(self, summary: RunSummary) -> None:
        """Called once after every finding has been published."""
        pass
