"""Conversions between canonical people and vCard records."""

from .expansion import (
    expand_person,
    job_uid,
    person_to_vcard,
    vcard_to_person,
    vcards_to_ycard,
    ycard_to_vcards,
)

__all__ = [
    "expand_person",
    "job_uid",
    "person_to_vcard",
    "vcard_to_person",
    "vcards_to_ycard",
    "ycard_to_vcards",
]
