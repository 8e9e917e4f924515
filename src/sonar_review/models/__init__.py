from .finding import Finding
from .review import EnrichedComment, PublishOutcome, RunSummary

__all__ = [
    "Finding",
    "EnrichedComment",
    "PublishOutcome",
    "RunSummary",
]
