from sonar_review.models.finding import Finding


ENRICH_PROMPT = """You are a code reviewer. Summarize this SonarQube issue into a clear GitHub PR comment.
Explain in simple language, give reasoning, and suggest a fix.

Issue:
Rule: {rule}
Severity: {severity}
File: {component}
Line: {line}
Message: {message}"""


def build_enrich_prompt(finding: Finding) -> str:
    """Build the completion prompt for one finding."""
    return ENRICH_PROMPT.format(
        rule=finding.rule,
        severity=finding.severity,
        component=finding.component,
        line=finding.line_label,
        message=finding.message,
    )
