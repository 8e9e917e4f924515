from .prompts import build_enrich_prompt
from .enricher import Enricher
from .runner import ReviewRunner

__all__ = ["build_enrich_prompt", "Enricher", "ReviewRunner"]
