"""Parsers for the yCard document format and the vCard wire format."""

from .vcard_parser import (
    RECOGNIZED_PROPERTIES,
    VCardParser,
    VCardParseResult,
    escape_value,
    parse_vcard,
    split_components,
    stringify_vcard,
    unescape_value,
)
from .ycard_parser import dump_document, load_document

__all__ = [
    "RECOGNIZED_PROPERTIES",
    "VCardParser",
    "VCardParseResult",
    "escape_value",
    "unescape_value",
    "split_components",
    "parse_vcard",
    "stringify_vcard",
    "load_document",
    "dump_document",
]
