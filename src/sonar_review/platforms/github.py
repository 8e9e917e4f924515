from typing import Any
import httpx


class GitHubClient:
    def __init__(self, token: str, base_url: str = "https://api.github.com", timeout: float = 30.0):
        self.token = token
        self.api_url = base_url.rstrip("/")
        self.timeout = timeout

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }

    async def create_review_comment(
        self,
        owner: str,
        repo: str,
        pull_number: int,
        commit_id: str,
        body: str,
        path: str,
        line: int,
    ) -> dict[str, Any]:
        """Create an inline review comment on a pull request."""
        async with httpx.AsyncClient() as client:
            response = await client.post(
                f"{self.api_url}/repos/{owner}/{repo}/pulls/{pull_number}/comments",
                headers=self._headers(),
                json={
                    "body": body,
                    "commit_id": commit_id,
                    "path": path,
                    "line": line,
                },
                timeout=self.timeout,
            )
            response.raise_for_status()
            return response.json()
