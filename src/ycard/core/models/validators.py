"""Validation functions for data models."""

from typing import Any, List


def to_str(value: Any) -> Any:
    """Convert numeric scalars to strings.

    YAML loads values such as postal codes or phone numbers as ints. Anything that
    is not a plain number (lists, mappings, booleans) is passed through unchanged so
    the field's own type check reports it.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return value


def to_list(value: Any) -> List[Any]:
    """Wrap a single value in a list; lists and tuples are passed through."""
    if not isinstance(value, (list, tuple)):
        return [value]
    return value


def pad_components(size: int):
    """Build a validator that pads a component list with empty strings up to `size`.

    Positional components are never dropped: a longer list is rejected instead.
    """

    def _pad(value: List[str]) -> List[str]:
        if len(value) > size:
            raise ValueError(f"expected at most {size} components, got {len(value)}")
        return list(value) + [""] * (size - len(value))

    return _pad


def email_kind(value: Any) -> Any:
    """Discriminate the email union: one address or a list of addresses."""
    if isinstance(value, str):
        return "single"
    if isinstance(value, (list, tuple)):
        return "many"
    return None


def phone_kind(value: Any) -> Any:
    """Discriminate the phone union: a bare number or a typed `{type, number}`."""
    if isinstance(value, (str, int)) and not isinstance(value, bool):
        return "bare"
    if isinstance(value, dict) or hasattr(value, "number"):
        return "typed"
    return None
