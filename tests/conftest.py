# tests/conftest.py
import pytest
from sonar_review.config import Settings


@pytest.fixture(autouse=True)
def isolated_env(request, monkeypatch, tmp_path):
    """Keep developer/CI environment and .env files out of the tests."""
    monkeypatch.chdir(tmp_path)
    if request.node.get_closest_marker("e2e"):
        return
    for name in Settings.model_fields:
        monkeypatch.delenv(name.upper(), raising=False)


def pytest_collection_modifyitems(items):
    """Mark tests by directory: unit, integration or e2e."""
    for item in items:
        path = str(item.fspath)
        for kind in ("unit", "integration", "e2e"):
            if f"/{kind}/" in path:
                item.add_marker(getattr(pytest.mark, kind))
