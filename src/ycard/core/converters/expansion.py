"""Conversions between canonical people and vCard records.

Expansion writes a multi-hat person as several records: a primary one, plus one
secondary record per extra job with the uid `<uid>-job-<index>`. Contraction does
not undo this; every record becomes its own person without jobs, because nothing
in a vCard tells a synthetic secondary record apart from an authored one.
"""

import logging
from typing import List, Optional

from ..models import (
    ADR_COMPONENTS,
    Address,
    Job,
    Person,
    TypedPhone,
    VCard,
    VCardAddress,
    VCardValue,
    YCard,
)

_LOGGER = logging.getLogger(__name__)


def job_uid(base_uid: str, index: int) -> str:
    """uid of the secondary record for the job at position `index`."""
    return f"{base_uid}-job-{index}"


def person_to_vcard(person: Person) -> VCard:
    """Convert one person to a single vCard using only its top-level fields."""
    card = VCard(uid=person.uid, fn=person.full_name)

    if person.name or person.surname:
        card.n = [person.surname or "", person.name or "", "", "", ""]

    card.title = person.title

    if person.org:
        card.org = [person.org]
        if person.org_unit:
            card.org.append(person.org_unit)
    elif person.org_unit:
        card.org = ["", person.org_unit]

    card.email = [
        VCardValue(value=email, type="work" if index == 0 else None)
        for index, email in enumerate(person.emails)
    ]
    card.tel = [VCardValue(value=phone.number, type=phone.type) for phone in person.typed_phones]

    if person.address is not None:
        address = person.address
        card.adr = [
            VCardAddress(
                value=[
                    "",
                    "",
                    address.street or "",
                    address.city or "",
                    address.state or "",
                    address.postal_code or "",
                    address.country or "",
                ],
                type="work",
            )
        ]

    return card


def _wearing(person: Person, job: Job) -> Person:
    """The person as seen through one job: role and reporting line taken from the job."""
    return person.model_copy(
        update={
            "title": job.role,
            "org": job.org or person.org,
            "org_unit": job.org_unit or person.org_unit,
            "manager": job.manager or person.manager,
        }
    )


def expand_person(person: Person) -> List[VCard]:
    """Expand a person to a primary vCard plus one vCard per additional job.

    The job at index 0 is skipped when the person has no top-level title, since
    the primary record already stands for it. Otherwise every job, index 0
    included, gets its own secondary record.
    """
    cards = [person_to_vcard(person)]

    for index, job in enumerate(person.jobs or []):
        if index == 0 and not person.title:
            continue

        card = person_to_vcard(_wearing(person, job))
        card.uid = job_uid(person.uid, index)
        cards.append(card)

    if len(cards) > 1:
        _LOGGER.debug("Expanded %r into %d vCards", person.uid, len(cards))
    return cards


def ycard_to_vcards(document: YCard) -> List[VCard]:
    """Expand every person of a document, in document order."""
    cards: List[VCard] = []
    for person in document:
        cards.extend(expand_person(person))
    return cards


def _split_full_name(fn: str):
    parts = fn.strip().split(" ", 1)
    if len(parts) == 2:
        return parts[0], parts[1].strip() or None
    return parts[0] or None, None


def _address_from_vcard(adr: VCardAddress) -> Optional[Address]:
    components = adr.value[:ADR_COMPONENTS]
    address = Address(
        street=components[2] or None,
        city=components[3] or None,
        state=components[4] or None,
        postal_code=components[5] or None,
        country=components[6] or None,
    )
    return None if address.is_empty() else address


def vcard_to_person(card: VCard, index: int = 0) -> Person:
    """Convert one vCard to a person.

    Args:
        card: The record to convert.
        index: Position of the record in its stream; it names records without a UID.

    Returns:
        A `Person` with no jobs.
    """
    name = surname = None
    if card.n is not None:
        surname = card.n[0] or None
        name = card.n[1] or None
    elif card.fn:
        name, surname = _split_full_name(card.fn)

    email = None
    if len(card.email) == 1:
        email = card.email[0].value
    elif card.email:
        email = [entry.value for entry in card.email]

    phone = [
        TypedPhone(type=tel.type or "work", number=tel.value) for tel in card.tel
    ] or None

    return Person(
        uid=card.uid or f"vcard-{index}",
        name=name,
        surname=surname,
        title=card.title,
        email=email,
        org=card.org[0] if card.org and card.org[0] else None,
        org_unit=card.org[1] if len(card.org) > 1 and card.org[1] else None,
        phone=phone,
        address=_address_from_vcard(card.adr[0]) if card.adr else None,
    )


def vcards_to_ycard(cards: List[VCard]) -> YCard:
    """Convert records to a document, one person per record and no merging."""
    return YCard(people=[vcard_to_person(card, index) for index, card in enumerate(cards)])
