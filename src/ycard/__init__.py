"""yCard - human-friendly organizational contact documents and vCard 4.0 conversion."""

from .core.models import Address, Job, Person, TypedPhone, VCard, YCard
from .core.errors import (
    DocumentValidationError,
    IssueKind,
    MalformedDocumentError,
    ValidationIssue,
    YCardError,
)
from .core.normalizer import normalize_document, normalize_person, normalize_ycard
from .core.parsers import VCardParser, parse_vcard, stringify_vcard
from .core.converters import expand_person, vcards_to_ycard, ycard_to_vcards
from .pipelines.conversion import (
    convert_vcard_to_ycard,
    convert_ycard_to_vcard,
    parse_ycard,
)
from .pipelines.diagnostics import collect_diagnostics

__version__ = "0.1.0"

__all__ = [
    "Address",
    "Job",
    "Person",
    "TypedPhone",
    "VCard",
    "YCard",
    "DocumentValidationError",
    "IssueKind",
    "MalformedDocumentError",
    "ValidationIssue",
    "YCardError",
    "normalize_document",
    "normalize_person",
    "normalize_ycard",
    "VCardParser",
    "parse_vcard",
    "stringify_vcard",
    "expand_person",
    "vcards_to_ycard",
    "ycard_to_vcards",
    "convert_vcard_to_ycard",
    "convert_ycard_to_vcard",
    "parse_ycard",
    "collect_diagnostics",
]
