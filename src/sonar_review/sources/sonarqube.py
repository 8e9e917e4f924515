# src/sonar_review/sources/sonarqube.py
import logging

import httpx
from pydantic import ValidationError

from sonar_review.models.finding import Finding


logger = logging.getLogger(__name__)


class SourceUnavailable(Exception):
    """Raised when the issue search cannot be completed."""

    def __init__(self, reason: str, status_code: int | None = None):
        self.reason = reason
        self.status_code = status_code
        if status_code is not None:
            super().__init__(f"SonarQube API error: {status_code} {reason}")
        else:
            super().__init__(f"SonarQube API error: {reason}")


class NetworkError(SourceUnavailable):
    """Raised on connection timeout or unreachable server."""


class SonarQubeClient:
    def __init__(self, base_url: str, project_key: str, token: str, timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.project_key = project_key
        self.timeout = timeout
        # SonarQube auth: token as username, empty password
        self.auth = httpx.BasicAuth(token, "")

    async def fetch_findings(self) -> list[Finding]:
        """Return the project's unresolved issues in server order."""
        try:
            async with httpx.AsyncClient(auth=self.auth) as client:
                response = await client.get(
                    f"{self.base_url}/api/issues/search",
                    params={"componentKeys": self.project_key, "resolved": "false"},
                    timeout=self.timeout,
                )
        except httpx.TransportError as e:
            raise NetworkError(str(e) or type(e).__name__) from e

        if not response.is_success:
            raise SourceUnavailable(response.reason_phrase, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            raise SourceUnavailable(f"invalid JSON body ({e})", status_code=response.status_code) from e
        if not isinstance(data, dict):
            raise SourceUnavailable("unexpected response shape", status_code=response.status_code)

        findings = []
        for raw in data.get("issues") or []:
            try:
                findings.append(Finding(**raw))
            except (TypeError, ValidationError) as e:
                logger.warning(f"Skipping malformed issue {raw.get('key', '?') if isinstance(raw, dict) else raw!r}: {e}")
        return findings
