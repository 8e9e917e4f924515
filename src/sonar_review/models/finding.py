from pydantic import BaseModel, ConfigDict, field_validator


class Finding(BaseModel):
    """One unresolved SonarQube issue."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    rule: str
    severity: str
    component: str
    message: str
    line: int | None = None
    key: str | None = None
    type: str | None = None

    @field_validator("line")
    @classmethod
    def drop_non_positive_line(cls, value: int | None) -> int | None:
        # SonarQube reports file-level issues without a line (or with 0)
        if value is not None and value < 1:
            return None
        return value

    @property
    def file_path(self) -> str:
        """Path part of a "<projectKey>:<filePath>" component."""
        _, sep, path = self.component.partition(":")
        if sep and path:
            return path
        return self.component

    @property
    def line_label(self) -> str:
        return str(self.line) if self.line is not None else "N/A"
