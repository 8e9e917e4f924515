# src/sonar_review/providers/azure_openai.py
import logging
from openai import AsyncAzureOpenAI
from .base import LLMProvider


logger = logging.getLogger(__name__)


class AzureOpenAIProvider(LLMProvider):
    def __init__(self, api_key: str, endpoint: str, deployment: str, api_version: str, timeout: float = 30.0):
        self.deployment = deployment
        # Retries are driven by sonar_review.retry, not the SDK
        self.client = AsyncAzureOpenAI(
            api_key=api_key,
            azure_endpoint=endpoint,
            api_version=api_version,
            timeout=timeout,
            max_retries=0,
        )

    async def complete(self, prompt: str, max_tokens: int = 200) -> str:
        response = await self.client.chat.completions.create(
            model=self.deployment,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=max_tokens,
        )

        text = response.choices[0].message.content or ""
        logger.debug(f"Azure OpenAI response length: {len(text)} chars")

        if not text.strip():
            raise ValueError(f"Azure OpenAI returned empty response. Full API response: {response}")

        return text.strip()
