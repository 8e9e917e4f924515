# tests/integration/test_github_publisher.py
import json
import pytest
from sonar_review.models.finding import Finding
from sonar_review.models.review import EnrichedComment, RunSummary
from sonar_review.platforms.github import GitHubClient
from sonar_review.publishers.github import GitHubReviewPublisher


COMMENTS_URL = "https://api.github.com/repos/octo/demo/pulls/7/comments"


def _publisher() -> GitHubReviewPublisher:
    return GitHubReviewPublisher(
        github=GitHubClient(token="ghp_test"),
        owner="octo",
        repo="demo",
        pull_number=7,
        commit_sha="0123abcd",
    )


@pytest.mark.integration
@pytest.mark.asyncio
async def test_create_review_comment(httpx_mock):
    httpx_mock.add_response(url=COMMENTS_URL, method="POST", status_code=201, json={"id": 99})

    client = GitHubClient(token="ghp_test")
    result = await client.create_review_comment(
        owner="octo",
        repo="demo",
        pull_number=7,
        commit_id="0123abcd",
        body="Consider a constant",
        path="src/app.ts",
        line=3,
    )

    assert result == {"id": 99}
    request = httpx_mock.get_request()
    assert request.headers["Authorization"] == "Bearer ghp_test"
    assert json.loads(request.content) == {
        "body": "Consider a constant",
        "commit_id": "0123abcd",
        "path": "src/app.ts",
        "line": 3,
    }


@pytest.mark.integration
@pytest.mark.asyncio
async def test_publish_posts_inline_comment_on_file_path(httpx_mock):
    httpx_mock.add_response(url=COMMENTS_URL, method="POST", status_code=201, json={"id": 1})
    finding = Finding(rule="r", severity="MAJOR", component="demo:src/app.ts", line=21, message="m")

    outcome = await _publisher().publish(EnrichedComment(text="Explained"), finding)

    assert outcome.published is True
    body = json.loads(httpx_mock.get_request().content)
    assert body["path"] == "src/app.ts"
    assert body["line"] == 21
    assert body["body"] == "Explained"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_publish_defaults_missing_line_to_one(httpx_mock):
    httpx_mock.add_response(url=COMMENTS_URL, method="POST", status_code=201, json={"id": 1})
    finding = Finding(rule="r", severity="INFO", component="demo:README.md", message="m")

    await _publisher().publish(EnrichedComment(text="Explained"), finding)

    assert json.loads(httpx_mock.get_request().content)["line"] == 1


@pytest.mark.integration
@pytest.mark.asyncio
async def test_publish_failure_is_reported_not_raised(httpx_mock):
    httpx_mock.add_response(
        url=COMMENTS_URL,
        method="POST",
        status_code=422,
        json={"message": "Validation Failed", "errors": ["line must be part of the diff"]},
    )
    finding = Finding(rule="r", severity="INFO", component="demo:src/app.ts", line=500, message="m")

    outcome = await _publisher().publish(EnrichedComment(text="Explained"), finding)

    assert outcome.published is False
    assert "422" in outcome.error


@pytest.mark.integration
@pytest.mark.asyncio
async def test_finish_logs_counts(caplog):
    with caplog.at_level("INFO"):
        await _publisher().finish(RunSummary(processed=3, published=2, publish_failures=1))

    assert "Posted 2 review comments on octo/demo#7 (1 failed)" in caplog.text
