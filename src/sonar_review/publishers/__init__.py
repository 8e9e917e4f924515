from .base import Publisher
from .console import ConsolePublisher
from .github import GitHubReviewPublisher

__all__ = ["Publisher", "ConsolePublisher", "GitHubReviewPublisher"]
