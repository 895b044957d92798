"""Document diagnostics for editor integrations.

Issues carry no source positions, so every diagnostic spans the whole document.
"""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel

from ycard.core.errors import IssueKind, MalformedDocumentError
from ycard.core.normalizer import normalize_document
from ycard.core.parsers import load_document
from ycard.core.validation import check_duplicate_uids, check_language_codes


class Diagnostic(BaseModel):
    start: int
    end: int
    severity: Literal["error", "warning"]
    kind: IssueKind
    message: str
    source: str = "yCard"


def collect_diagnostics(text: str) -> List[Diagnostic]:
    """Normalize and validate document text and report every problem.

    Errors come first, followed by warnings for duplicate uids and malformed
    language codes among the people that validated.
    """
    try:
        data = load_document(text)
    except MalformedDocumentError as e:
        issues = [e.issue]
    else:
        result = normalize_document(data)
        issues = list(result.issues)
        if result.document is not None:
            issues += check_duplicate_uids(result.document)
            issues += check_language_codes(result.document)

    return [
        Diagnostic(
            start=0,
            end=len(text),
            severity=issue.severity,
            kind=issue.kind,
            message=f"{issue.path}: {issue.message}" if issue.path else issue.message,
        )
        for issue in issues
    ]
