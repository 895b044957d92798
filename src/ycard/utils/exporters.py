"""Flat exports of a normalized yCard document (LDIF and CSV).

These are plain projections of canonical people; they never resolve aliases.
"""

import csv

import pandas as pd

from ycard.core.models import YCard

DEFAULT_BASE_DN = "dc=example,dc=com"

CSV_HEADERS = [
    "UID",
    "Name",
    "Surname",
    "Title",
    "Email",
    "Phone",
    "Organization",
    "Org Unit",
    "Manager",
]

LDIF_OBJECT_CLASSES = ("inetOrgPerson", "organizationalPerson", "person", "top")


def ycard_to_ldif(document: YCard, base_dn: str = DEFAULT_BASE_DN) -> str:
    """Write one inetOrgPerson entry per person.

    Args:
        document: The normalized document.
        base_dn: Suffix appended to each entry's `uid=<uid>` DN.

    Returns:
        LDIF text, entries separated by a blank line.
    """
    entries = []
    for person in document:
        attributes = [f"dn: uid={person.uid},{base_dn}"]
        attributes += [f"objectClass: {object_class}" for object_class in LDIF_OBJECT_CLASSES]
        attributes.append(f"uid: {person.uid}")

        if person.name:
            attributes.append(f"givenName: {person.name}")
        if person.surname:
            attributes.append(f"sn: {person.surname}")
        if person.name and person.surname:
            attributes.append(f"cn: {person.name} {person.surname}")
        if person.title:
            attributes.append(f"title: {person.title}")
        if person.org:
            attributes.append(f"o: {person.org}")
        if person.org_unit:
            attributes.append(f"ou: {person.org_unit}")
        if person.manager:
            attributes.append(f"manager: {person.manager}")

        attributes += [f"mail: {email}" for email in person.emails]
        attributes += [f"telephoneNumber: {phone.number}" for phone in person.typed_phones]

        entries.append("\n".join(attributes))

    return "\n\n".join(entries) + "\n"


def ycard_to_csv(document: YCard) -> str:
    """Write one row per person; multi-valued fields are joined with ';'."""
    rows = [
        [
            person.uid,
            person.name or "",
            person.surname or "",
            person.title or "",
            ";".join(person.emails),
            ";".join(phone.number for phone in person.typed_phones),
            person.org or "",
            person.org_unit or "",
            person.manager or "",
        ]
        for person in document
    ]
    people_df = pd.DataFrame(rows, columns=CSV_HEADERS)
    return people_df.to_csv(index=False, quoting=csv.QUOTE_ALL, lineterminator="\n")
