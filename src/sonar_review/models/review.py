from dataclasses import dataclass

from pydantic import BaseModel


class EnrichedComment(BaseModel):
    text: str
    fallback: bool = False
    error: str | None = None


class PublishOutcome(BaseModel):
    published: bool
    error: str | None = None


@dataclass
class RunSummary:
    """Counters collected by the runner over one pass."""
    processed: int = 0
    enriched: int = 0
    fallbacks: int = 0
    published: int = 0
    publish_failures: int = 0
