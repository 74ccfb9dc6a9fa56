"""Validation report types for product drafts."""


from dataclasses import dataclass, field

ValidationErrors = dict[str, str]


@dataclass(frozen=True)
class ValidationIssue:
    code: str
    message: str
    field: str | None = None


@dataclass
class ValidationReport:
    valid: bool
    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> ValidationErrors:
        """Field-keyed messages; a fresh dict on every access."""
        return {issue.field: issue.message for issue in self.issues if issue.field}


__all__ = ["ValidationErrors", "ValidationIssue", "ValidationReport"]
