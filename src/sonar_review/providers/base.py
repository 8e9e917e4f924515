# src/sonar_review/providers/base.py
from abc import ABC, abstractmethod


class LLMProvider(ABC):
    @abstractmethod
    async def complete(self, prompt: str, max_tokens: int = 200) -> str:
        """Send a single user message and return the completion text."""
        pass
