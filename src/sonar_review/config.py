# src/sonar_review/config.py
import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


PUBLISHERS = ("console", "github")


class ConfigurationMissing(Exception):
    """Raised before any network call when required settings are absent."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__("Missing required environment variables: " + ", ".join(missing))


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # SonarQube
    sonarqube_url: str | None = None
    sonarqube_project: str | None = None
    sonarqube_token: str | None = None

    # Azure OpenAI
    azure_openai_api_key: str | None = None
    azure_openai_endpoint: str | None = None
    azure_openai_resource: str | None = None
    azure_openai_deployment: str | None = None
    azure_openai_api_version: str = "2024-02-15-preview"

    # GitHub (review-comment publisher only)
    github_token: str | None = None
    github_repository: str | None = None
    pr_number: str | None = None
    github_sha: str | None = None
    github_api_url: str = "https://api.github.com"

    # Defaults
    publisher: str = "console"
    max_tokens: int = 200
    enrich_retries: int = 2
    retry_base_delay_ms: int = 500
    http_timeout: float = 30.0
    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError("expected one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    @property
    def openai_endpoint(self) -> str | None:
        if self.azure_openai_endpoint:
            return self.azure_openai_endpoint
        if self.azure_openai_resource:
            return f"https://{self.azure_openai_resource}.openai.azure.com"
        return None

    @property
    def repository(self) -> tuple[str, str]:
        """Split GITHUB_REPOSITORY into (owner, repo)."""
        parts = (self.github_repository or "").strip().split("/")
        if len(parts) != 2:
            return "", ""
        return parts[0], parts[1]

    def missing(self, publisher: str | None = None) -> list[str]:
        """Return the environment variable names of absent required values."""
        publisher = publisher or self.publisher
        required = {
            "SONARQUBE_URL": self.sonarqube_url,
            "SONARQUBE_PROJECT": self.sonarqube_project,
            "SONARQUBE_TOKEN": self.sonarqube_token,
            "AZURE_OPENAI_API_KEY": self.azure_openai_api_key,
            "AZURE_OPENAI_ENDPOINT": self.openai_endpoint,
            "AZURE_OPENAI_DEPLOYMENT": self.azure_openai_deployment,
            "AZURE_OPENAI_API_VERSION": self.azure_openai_api_version,
        }
        if publisher == "github":
            required.update({
                "GITHUB_TOKEN": self.github_token,
                "GITHUB_REPOSITORY": self.github_repository,
                "PR_NUMBER": self.pr_number,
                "GITHUB_SHA": self.github_sha,
            })

        missing = [name for name, value in required.items() if not value or not str(value).strip()]

        if publisher == "github":
            owner, repo = self.repository
            if self.github_repository and not (owner and repo):
                missing.append("GITHUB_REPOSITORY (expected owner/repo)")
            if self.pr_number and not self.pr_number.strip().isdigit():
                missing.append("PR_NUMBER (expected an integer)")
        return missing

    def require(self, publisher: str | None = None) -> None:
        publisher = publisher or self.publisher
        if publisher not in PUBLISHERS:
            raise ConfigurationMissing([f"PUBLISHER (expected one of: {', '.join(PUBLISHERS)})"])
        missing = self.missing(publisher)
        if missing:
            raise ConfigurationMissing(missing)
