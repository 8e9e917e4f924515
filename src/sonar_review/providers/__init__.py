# src/sonar_review/providers/__init__.py
from .base import LLMProvider
from .azure_openai import AzureOpenAIProvider

__all__ = ["LLMProvider", "AzureOpenAIProvider"]
