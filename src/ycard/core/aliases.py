"""Alias priority tables.

Each canonical field maps to the ordered tuple of input keys that may carry it,
canonical key first. Resolution takes the first key whose value is not None, so
the position in the tuple is the priority. Adding an alias is a one-line change.
"""

from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple

PERSON_ALIASES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "uid": ("uid", "id"),
        "name": ("name", "nombre", "displayName"),
        "surname": ("surname", "apellido", "sn", "lastName"),
        "title": ("title", "puesto", "role"),
        "email": ("email", "correo", "mail"),
        "org": ("org", "organization", "company"),
        "org_unit": ("org_unit", "department", "ou"),
        "manager": ("manager", "jefe", "上司", "boss"),
        "phone": ("phone", "tel"),
        "address": ("address", "adr"),
        "jobs": ("jobs",),
        "i18n": ("i18n",),
    }
)

JOB_ALIASES: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "role": ("role", "title"),
        "fte": ("fte",),
        "manager": ("manager", "jefe"),
        "dotted": ("dotted",),
        "org_unit": ("org_unit",),
        "org": ("org",),
        "primary": ("primary",),
    }
)


def resolve(raw: Mapping[str, Any], keys: Tuple[str, ...]) -> Tuple[Optional[str], Any]:
    """Return `(key, value)` for the first key in `keys` present with a non-None value.

    Returns `(None, None)` when none of the keys carries a value.
    """
    for key in keys:
        value = raw.get(key)
        if value is not None:
            return key, value
    return None, None


def resolve_fields(
    raw: Mapping[str, Any], table: Mapping[str, Tuple[str, ...]]
) -> dict:
    """Collapse `raw` into a mapping holding only the canonical fields of `table`.

    Keys that appear in no priority list are ignored.
    """
    resolved = {}
    for field, keys in table.items():
        _, value = resolve(raw, keys)
        if value is not None:
            resolved[field] = value
    return resolved
