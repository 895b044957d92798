"""Error kinds and issue reporting for yCard processing."""

from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class IssueKind(str, Enum):
    """The kinds of problems the normalizer, validator and parser report."""

    MISSING_REQUIRED_FIELD = "MissingRequiredField"
    OUT_OF_RANGE_VALUE = "OutOfRangeValue"
    TYPE_MISMATCH = "TypeMismatch"
    MALFORMED_DOCUMENT = "MalformedDocument"
    # Diagnostic-only kinds, always reported as warnings.
    DUPLICATE_UID = "DuplicateUid"
    INVALID_LANGUAGE_CODE = "InvalidLanguageCode"


class ValidationIssue(BaseModel):
    """A single problem found in a document or a wire record."""

    kind: IssueKind
    message: str
    path: str = Field("", description="Dotted location of the offending value, e.g. 'people.0.jobs.1.fte'.")
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        location = f"{self.path}: " if self.path else ""
        return f"[{self.kind.value}] {location}{self.message}"


class YCardError(Exception):
    """Base class for all yCard errors."""


class DocumentValidationError(YCardError):
    """Raised when a document fails normalization or validation.

    Args:
        issues: Every issue found in the document, not just the first one.
    """

    def __init__(self, issues: List[ValidationIssue]):
        self.issues = issues
        details = "; ".join(str(issue) for issue in issues)
        super().__init__(f"{len(issues)} validation issue(s): {details}")


class MalformedDocumentError(YCardError, ValueError):
    """Raised when text cannot be read as a yCard document or a vCard stream."""

    def __init__(self, message: str, issue: Optional[ValidationIssue] = None):
        self.issue = issue or ValidationIssue(
            kind=IssueKind.MALFORMED_DOCUMENT, message=message
        )
        super().__init__(message)
