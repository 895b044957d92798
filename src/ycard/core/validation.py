"""Validation gate and diagnostic checks over the canonical model.

Validation collects every problem in one pass: pydantic reports all field errors
of a model at once, and each of them is translated into a `ValidationIssue`.
"""

import logging
import re
from collections import Counter
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from .errors import IssueKind, ValidationIssue
from .models import Person, YCard

_LOGGER = logging.getLogger(__name__)

LANGUAGE_CODE_PATTERN = re.compile(r"[a-z]{2,3}")

_RANGE_ERRORS = frozenset(
    {"greater_than", "greater_than_equal", "less_than", "less_than_equal"}
)
_UNION_FIELDS = frozenset({"email", "phone"})


def join_path(*parts: Any) -> str:
    return ".".join(str(part) for part in parts if part != "")


def classify_error(error: Mapping[str, Any]) -> IssueKind:
    """Map one pydantic error to an issue kind."""
    loc = error.get("loc") or ()
    field = loc[0] if loc else None
    error_type = error.get("type", "")

    # Anything wrong inside the email/phone unions is a shape problem, even a
    # typed phone that lacks its number.
    if field in _UNION_FIELDS:
        return IssueKind.TYPE_MISMATCH
    if error_type in _RANGE_ERRORS:
        return IssueKind.OUT_OF_RANGE_VALUE
    if error_type == "missing":
        return IssueKind.MISSING_REQUIRED_FIELD
    if field == "uid" and error_type == "string_too_short":
        return IssueKind.MISSING_REQUIRED_FIELD
    return IssueKind.TYPE_MISMATCH


def issues_from_validation_error(
    error: ValidationError, path: str = ""
) -> List[ValidationIssue]:
    """Translate every error in a pydantic `ValidationError` into an issue."""
    issues = []
    for detail in error.errors():
        kind = classify_error(detail)
        message = detail.get("msg", "invalid value")
        if kind is IssueKind.MISSING_REQUIRED_FIELD and detail["loc"] == ("uid",):
            message = "uid is required (neither 'uid' nor 'id' is set)"
        issues.append(
            ValidationIssue(
                kind=kind,
                message=message,
                path=join_path(path, *detail.get("loc", ())),
            )
        )
    return issues


def validate_person(
    data: Dict[str, Any], path: str = ""
) -> Tuple[Optional[Person], List[ValidationIssue]]:
    """Build a `Person` from alias-resolved data.

    Args:
        data: A mapping holding canonical field names only.
        path: Location prefix for reported issues, e.g. 'people.3'.

    Returns:
        The person and an empty list, or `None` and every issue found.
    """
    try:
        return Person.model_validate(data), []
    except ValidationError as e:
        issues = issues_from_validation_error(e, path)
        _LOGGER.debug("Person at %r failed validation with %d issue(s)", path, len(issues))
        return None, issues


def check_duplicate_uids(document: YCard) -> List[ValidationIssue]:
    """Report uids used by more than one person. Duplicates are warnings, never errors."""
    counts = Counter(document.uids())
    issues = []
    for index, person in enumerate(document.people):
        if counts[person.uid] > 1:
            issues.append(
                ValidationIssue(
                    kind=IssueKind.DUPLICATE_UID,
                    message=f"Duplicate uid '{person.uid}'",
                    path=join_path("people", index, "uid"),
                    severity="warning",
                )
            )
    return issues


def check_language_codes(document: YCard) -> List[ValidationIssue]:
    """Flag i18n language codes that are not 2-3 lowercase letters.

    This is advisory: a document with odd language codes is still valid.
    """
    issues = []
    for index, person in enumerate(document.people):
        for field, translations in (person.i18n or {}).items():
            for language in translations:
                if not LANGUAGE_CODE_PATTERN.fullmatch(language):
                    issues.append(
                        ValidationIssue(
                            kind=IssueKind.INVALID_LANGUAGE_CODE,
                            message=f"Invalid language code '{language}'",
                            path=join_path("people", index, "i18n", field),
                            severity="warning",
                        )
                    )
    return issues
