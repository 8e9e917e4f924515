# tests/unit/test_models.py
import pytest
from pydantic import ValidationError
from sonar_review.models import EnrichedComment, Finding, PublishOutcome, RunSummary


def _finding(**overrides) -> Finding:
    data = {
        "rule": "typescript:S1854",
        "severity": "MAJOR",
        "component": "myproj:src/a/b.ts",
        "message": "Remove this useless assignment to variable \"x\".",
        "line": 12,
    }
    data.update(overrides)
    return Finding(**data)


@pytest.mark.unit
def test_file_path_strips_project_key():
    assert _finding().file_path == "src/a/b.ts"


@pytest.mark.unit
def test_file_path_without_colon_is_whole_component():
    assert _finding(component="myproj").file_path == "myproj"


@pytest.mark.unit
def test_file_path_with_empty_path_is_whole_component():
    assert _finding(component="myproj:").file_path == "myproj:"


@pytest.mark.unit
def test_file_path_splits_on_first_colon_only():
    assert _finding(component="myproj:src/weird:name.ts").file_path == "src/weird:name.ts"


@pytest.mark.unit
def test_line_is_optional():
    finding = _finding(line=None)
    assert finding.line is None
    assert finding.line_label == "N/A"


@pytest.mark.unit
def test_line_zero_means_no_line():
    assert _finding(line=0).line is None


@pytest.mark.unit
def test_line_label_for_present_line():
    assert _finding().line_label == "12"


@pytest.mark.unit
def test_finding_keeps_sonar_key_and_type_and_ignores_the_rest():
    finding = Finding(
        key="AYx1",
        type="CODE_SMELL",
        rule="python:S1481",
        severity="MINOR",
        component="proj:app.py",
        message="Remove the unused local variable.",
        textRange={"startLine": 3, "endLine": 3},
        effort="5min",
    )
    assert finding.key == "AYx1"
    assert finding.type == "CODE_SMELL"
    assert finding.line is None


@pytest.mark.unit
def test_finding_is_immutable():
    finding = _finding()
    with pytest.raises(ValidationError):
        finding.message = "changed"


@pytest.mark.unit
def test_finding_requires_message():
    with pytest.raises(ValidationError):
        Finding(rule="r", severity="INFO", component="p:f")


@pytest.mark.unit
def test_result_models():
    comment = EnrichedComment(text="Original", fallback=True, error="quota")
    assert comment.fallback is True
    assert PublishOutcome(published=False, error="422").error == "422"
    assert RunSummary().processed == 0
