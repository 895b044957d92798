"""Pipelines converting yCard documents to vCard text and back."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from ycard.core.converters import vcards_to_ycard, ycard_to_vcards
from ycard.core.models import VCard, YCard
from ycard.core.normalizer import normalize_ycard
from ycard.core.parsers import VCardParser, dump_document, load_document

_LOGGER = logging.getLogger(__name__)


def parse_ycard(text: str) -> YCard:
    """Load and normalize yCard text.

    Raises:
        MalformedDocumentError: If the text is not valid YAML/JSON.
        DocumentValidationError: With every issue, if any person fails validation.
    """
    return normalize_ycard(load_document(text))


def ycard_to_vcf(document: YCard) -> str:
    """Expand a normalized document and serialize it as vCard text."""
    cards = ycard_to_vcards(document)
    _LOGGER.info("Writing %d vCard(s) for %d people", len(cards), len(document))
    return VCardParser().to_vcf(cards)


def convert_ycard_to_vcard(text: str) -> str:
    """Document text to vCard text."""
    return ycard_to_vcf(parse_ycard(text))


def vcf_to_ycard(text: str, strict: bool = False) -> YCard:
    """Parse vCard text and contract every record into a person.

    Malformed records are skipped (and logged) unless `strict` is set.
    """
    cards: List[VCard] = VCardParser().parse(text, strict=strict).cards
    document = vcards_to_ycard(cards)
    _LOGGER.info("Read %d people from vCard text", len(document))
    return document


def convert_vcard_to_ycard(text: str, strict: bool = False) -> str:
    """vCard text to yCard document text (YAML)."""
    return dump_document(vcf_to_ycard(text, strict=strict))


def convert_file(input_path: str | Path, direction: str = "export", strict: bool = False) -> str:
    """Convert a file in either direction.

    Args:
        input_path: The yCard file ('export') or vCard file ('import').
        direction: 'export' for yCard -> vCard, 'import' for vCard -> yCard.
        strict: For 'import', fail on the first malformed record.

    Returns:
        The converted text.
    """
    text = Path(input_path).read_text(encoding="utf-8")
    if direction == "export":
        return convert_ycard_to_vcard(text)
    if direction == "import":
        return convert_vcard_to_ycard(text, strict=strict)
    raise ValueError(f"Unsupported direction: {direction}")
