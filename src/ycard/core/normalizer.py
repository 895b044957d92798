"""Alias resolution: raw yCard mappings to canonical `Person` models."""

import logging
from typing import Any, Dict, List, Mapping, Optional

from pydantic import BaseModel, Field

from .aliases import JOB_ALIASES, PERSON_ALIASES, resolve_fields
from .errors import DocumentValidationError, IssueKind, ValidationIssue
from .models import Person, YCard
from .validation import join_path, validate_person

_LOGGER = logging.getLogger(__name__)

_KNOWN_PERSON_KEYS = frozenset(key for keys in PERSON_ALIASES.values() for key in keys)


class NormalizationResult(BaseModel):
    """Outcome of normalizing one person: a `Person`, or the issues that prevented it."""

    person: Optional[Person] = None
    issues: List[ValidationIssue] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.person is not None


class DocumentResult(BaseModel):
    """Outcome of normalizing a whole document.

    `document` holds the people that normalized cleanly; it is `None` only when the
    document root itself is unusable. `issues` lists every failure of every person.
    """

    document: Optional[YCard] = None
    issues: List[ValidationIssue] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.document is not None and not self.issues


def _resolve_job(raw_job: Any) -> Any:
    # Non-mapping entries are left for the validator to report.
    if not isinstance(raw_job, Mapping):
        return raw_job
    return resolve_fields(raw_job, JOB_ALIASES)


def _resolve_i18n(raw_i18n: Any) -> Any:
    """Fold aliased field names of a translation table onto canonical names.

    The same priority rule as for person fields applies; field names that are
    neither canonical nor an alias are kept.
    """
    if not isinstance(raw_i18n, Mapping):
        return raw_i18n
    resolved = resolve_fields(raw_i18n, PERSON_ALIASES)
    for key, value in raw_i18n.items():
        if key not in _KNOWN_PERSON_KEYS and value is not None:
            resolved[key] = value
    return resolved


def resolve_person_fields(raw: Mapping[str, Any]) -> Dict[str, Any]:
    """Resolve every alias of a raw person mapping, recursing into jobs and i18n."""
    resolved = resolve_fields(raw, PERSON_ALIASES)
    if isinstance(resolved.get("jobs"), list):
        resolved["jobs"] = [_resolve_job(job) for job in resolved["jobs"]]
    if "i18n" in resolved:
        resolved["i18n"] = _resolve_i18n(resolved["i18n"])
    return resolved


def normalize_person(raw: Any, path: str = "") -> NormalizationResult:
    """Normalize one raw person mapping into a canonical `Person`.

    Args:
        raw: A mapping whose keys may be canonical names or any declared alias.
        path: Location prefix used in reported issues.

    Returns:
        A `NormalizationResult` with the person, or with every issue found.
    """
    if not isinstance(raw, Mapping):
        return NormalizationResult(
            issues=[
                ValidationIssue(
                    kind=IssueKind.TYPE_MISMATCH,
                    message=f"Expected a mapping for a person, got {type(raw).__name__}",
                    path=path,
                )
            ]
        )

    person, issues = validate_person(resolve_person_fields(raw), path)
    return NormalizationResult(person=person, issues=issues)


def normalize_document(data: Any) -> DocumentResult:
    """Normalize a loaded yCard document (`{"people": [...]}`).

    Every person is normalized even after a failure, so the result carries the
    complete list of problems for the document.
    """
    if not isinstance(data, Mapping):
        return DocumentResult(
            issues=[
                ValidationIssue(
                    kind=IssueKind.TYPE_MISMATCH,
                    message="Document root must be a mapping with a 'people' list",
                )
            ]
        )
    if data.get("people") is None:
        return DocumentResult(
            issues=[
                ValidationIssue(
                    kind=IssueKind.MISSING_REQUIRED_FIELD,
                    message="Document has no 'people' list",
                    path="people",
                )
            ]
        )
    if not isinstance(data["people"], list):
        return DocumentResult(
            issues=[
                ValidationIssue(
                    kind=IssueKind.TYPE_MISMATCH,
                    message="'people' must be a list",
                    path="people",
                )
            ]
        )

    people = []
    issues = []
    for index, raw in enumerate(data["people"]):
        result = normalize_person(raw, path=join_path("people", index))
        if result.ok:
            people.append(result.person)
        issues.extend(result.issues)

    _LOGGER.debug(
        "Normalized %d of %d people (%d issue(s))",
        len(people),
        len(data["people"]),
        len(issues),
    )
    return DocumentResult(document=YCard(people=people), issues=issues)


def normalize_ycard(data: Any) -> YCard:
    """Normalize a document, raising `DocumentValidationError` on any issue."""
    result = normalize_document(data)
    if not result.ok:
        raise DocumentValidationError(result.issues)
    return result.document
