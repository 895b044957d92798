"""Core data models for yCard processing."""

from .person import Address, Email, Job, Person, Phone, TypedPhone
from .document import YCard
from .vcard import ADR_COMPONENTS, N_COMPONENTS, VCard, VCardAddress, VCardValue
from .validators import (
    to_str,
    to_list,
    pad_components,
)

__all__ = [
    "Address",
    "Email",
    "Job",
    "Person",
    "Phone",
    "TypedPhone",
    "YCard",
    "VCard",
    "VCardAddress",
    "VCardValue",
    "N_COMPONENTS",
    "ADR_COMPONENTS",
    "to_str",
    "to_list",
    "pad_components",
]
