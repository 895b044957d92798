"""Summary statistics and per-language views of a normalized document."""

from typing import List

from pydantic import BaseModel, Field

from ycard.core.models import Person, YCard

LOCALIZABLE_FIELDS = frozenset({"name", "surname", "title", "org", "org_unit"})


class YCardSummary(BaseModel):
    total_people: int = 0
    organizations: List[str] = Field(default_factory=list)
    titles: List[str] = Field(default_factory=list)
    has_multi_hat: bool = False


def _unique(values) -> List[str]:
    # dict keeps first-seen order
    return list(dict.fromkeys(value for value in values if value))


def get_summary(document: YCard) -> YCardSummary:
    """Count people and collect distinct organizations and titles.

    Missing fields are skipped. This never fails on a normalized document.
    """
    return YCardSummary(
        total_people=len(document),
        organizations=_unique(person.org for person in document),
        titles=_unique(person.title for person in document),
        has_multi_hat=any(person.is_multi_hat for person in document),
    )


def localize_person(person: Person, language: str) -> Person:
    """Return a copy of `person` with fields replaced by their `language` translation.

    Only translations of plain text fields are applied; others are ignored.
    """
    updates = {}
    for field, translations in (person.i18n or {}).items():
        if field in LOCALIZABLE_FIELDS and language in translations:
            updates[field] = translations[language]
    if not updates:
        return person
    return person.model_copy(update=updates)


def localize_ycard(document: YCard, language: str) -> YCard:
    return YCard(people=[localize_person(person, language) for person in document])
