"""vCard 4.0 parser and serializer."""

import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, ValidationError

from ..errors import IssueKind, MalformedDocumentError, ValidationIssue
from ..models import VCard

_LOGGER = logging.getLogger(__name__)

CRLF = "\r\n"

RECOGNIZED_PROPERTIES = frozenset(
    {
        "VERSION",
        "UID",
        "FN",
        "N",
        "TITLE",
        "ORG",
        "EMAIL",
        "TEL",
        "ADR",
        "URL",
        "NOTE",
        "CATEGORIES",
    }
)

_UNESCAPES = {"n": "\n", "N": "\n", ",": ",", ";": ";", "\\": "\\"}
_ESCAPE_SEQUENCE = re.compile(r"\\(.)")


def escape_value(value: str) -> str:
    """Escape backslashes, commas, semicolons and newlines in a text value.

    CRLF and bare CR are written as a plain newline, which is the only line
    break the format can carry inside a value.
    """
    return (
        value.replace("\r\n", "\n")
        .replace("\r", "\n")
        .replace("\\", "\\\\")
        .replace(",", "\\,")
        .replace(";", "\\;")
        .replace("\n", "\\n")
    )


def unescape_value(value: str) -> str:
    """Undo `escape_value`. Unknown escape sequences are kept as they are."""
    return _ESCAPE_SEQUENCE.sub(
        lambda match: _UNESCAPES.get(match.group(1), match.group(0)), value
    )


def split_components(value: str, separator: str) -> List[str]:
    """Split a raw value on unescaped `separator` and unescape each component."""
    components = []
    current = []
    chars = iter(value)
    for char in chars:
        if char == "\\":
            current.append(char)
            current.append(next(chars, ""))
        elif char == separator:
            components.append("".join(current))
            current = []
        else:
            current.append(char)
    components.append("".join(current))
    return [unescape_value(component) for component in components]


def _is_marker(line: str) -> bool:
    return line.strip().upper() in ("BEGIN:VCARD", "END:VCARD")


def unfold_lines(text: str) -> List[str]:
    """Normalize line endings and join folded continuation lines.

    BEGIN and END markers are never folded, neither onto another line nor as a
    continuation, so indented records keep their boundaries.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    lines: List[str] = []
    for line in text.split("\n"):
        if (
            line[:1] in (" ", "\t")
            and lines
            and lines[-1].strip()
            and not _is_marker(lines[-1])
            and not _is_marker(line)
        ):
            lines[-1] += line[1:]
        else:
            lines.append(line)
    return lines


def _find_unquoted(text: str, char: str) -> int:
    """Index of the first `char` outside double quotes, or -1."""
    quoted = False
    for index, current in enumerate(text):
        if current == '"':
            quoted = not quoted
        elif current == char and not quoted:
            return index
    return -1


def _split_unquoted(text: str, separator: str) -> List[str]:
    parts = []
    while True:
        index = _find_unquoted(text, separator)
        if index < 0:
            parts.append(text)
            return parts
        parts.append(text[:index])
        text = text[index + 1:]


class VCardParseResult(BaseModel):
    """Records parsed from a vCard stream, and one issue per malformed record."""

    cards: List[VCard] = Field(default_factory=list)
    issues: List[ValidationIssue] = Field(default_factory=list)


class VCardParser:
    """Read and write vCard 4.0 text.

    Only the properties in `RECOGNIZED_PROPERTIES` are read; anything else is
    dropped. Of the property parameters only TYPE is kept.
    """

    def parse(self, text: str, strict: bool = False) -> VCardParseResult:
        """Parse vCard text into `VCard` records.

        Args:
            text: vCard content, with any mix of line endings.
            strict: Raise on the first malformed record instead of collecting issues.

        Returns:
            A `VCardParseResult` with the well-formed records in file order.

        Raises:
            MalformedDocumentError: If `strict` and a record is malformed.
        """
        cards: List[VCard] = []
        issues: List[ValidationIssue] = []
        fields: Optional[Dict[str, Any]] = None
        broken = False
        begin_line = 0

        def fail(message: str) -> None:
            issues.append(
                ValidationIssue(kind=IssueKind.MALFORMED_DOCUMENT, message=message)
            )

        for number, line in enumerate(unfold_lines(text), start=1):
            marker = line.strip().upper()

            if marker == "BEGIN:VCARD":
                if fields is not None and not broken:
                    fail(f"line {begin_line}: BEGIN:VCARD without matching END:VCARD")
                fields, broken, begin_line = {}, False, number
                continue

            if marker == "END:VCARD":
                if fields is None:
                    fail(f"line {number}: END:VCARD without matching BEGIN:VCARD")
                elif not broken:
                    card = self._build_card(fields, begin_line, fail)
                    if card is not None:
                        cards.append(card)
                fields = None
                continue

            if fields is None or broken:
                continue
            if not line.strip() or line.lstrip().startswith("#"):
                continue

            try:
                self._add_property(fields, line)
            except ValueError as e:
                fail(f"line {number}: {e}")
                broken = True

        if fields is not None and not broken:
            fail(f"line {begin_line}: BEGIN:VCARD without matching END:VCARD")

        if strict and issues:
            raise MalformedDocumentError(issues[0].message, issues[0])
        for issue in issues:
            _LOGGER.warning("Skipping malformed vCard record: %s", issue.message)
        return VCardParseResult(cards=cards, issues=issues)

    def to_vcards(self, text: str, strict: bool = False) -> List[VCard]:
        """Parse vCard text and return only the records."""
        return self.parse(text, strict=strict).cards

    def _build_card(self, fields: Dict[str, Any], begin_line: int, fail) -> Optional[VCard]:
        if not fields:
            _LOGGER.debug("Discarding vCard at line %d with no properties", begin_line)
            return None
        try:
            return VCard.model_validate(fields)
        except ValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            )
            fail(f"line {begin_line}: invalid vCard ({details})")
            return None

    def _add_property(self, fields: Dict[str, Any], line: str) -> None:
        """Add one content line to the record being built."""
        # Quoted parameter values may contain ':' and ';'.
        colon = _find_unquoted(line, ":")
        if colon < 0:
            raise ValueError(f"content line without ':' ({line!r})")
        head, value = line[:colon], line[colon + 1:]

        name, *parameters = _split_unquoted(head, ";")
        # Drop a property group prefix such as 'item1.'
        name = name.strip().upper().rsplit(".", 1)[-1]
        if name not in RECOGNIZED_PROPERTIES:
            _LOGGER.debug("Dropping unrecognized property %r", name)
            return

        type_ = self._find_type(parameters)

        if name == "VERSION":
            # The record is always written back as 4.0.
            if value.strip() != "4.0":
                _LOGGER.debug("Reading vCard version %r as 4.0", value.strip())
        elif name in ("UID", "FN", "TITLE", "NOTE"):
            fields[name.lower()] = unescape_value(value)
        elif name in ("N", "ORG"):
            fields[name.lower()] = split_components(value, ";")
        elif name in ("EMAIL", "TEL"):
            fields.setdefault(name.lower(), []).append(
                {"value": unescape_value(value), "type": type_}
            )
        elif name == "ADR":
            fields.setdefault("adr", []).append(
                {"value": split_components(value, ";"), "type": type_}
            )
        elif name == "URL":
            fields.setdefault("url", []).append(unescape_value(value))
        elif name == "CATEGORIES":
            fields.setdefault("categories", []).extend(split_components(value, ","))

    @staticmethod
    def _find_type(parameters: List[str]) -> Optional[str]:
        for parameter in parameters:
            key, equals, value = parameter.partition("=")
            if equals and key.strip().upper() == "TYPE":
                return value.strip().strip('"')
        return None

    def to_vcf(
        self, cards: List[VCard], file_path: Optional[str | Path] = None
    ) -> str:
        """Serialize records to vCard 4.0 text, and optionally save it to a file.

        Lines end with CRLF and records are separated by a blank line.

        Args:
            cards: The records to serialize.
            file_path: The file path to save the text to.

        Returns:
            The vCard text.
        """
        vcf = CRLF.join(self._card_to_text(card) for card in cards)
        if file_path is not None:
            # newline="" keeps the CRLF terminators as written.
            with open(file_path, "w", encoding="utf-8", newline="") as f:
                f.write(vcf)
        return vcf

    def _card_to_text(self, card: VCard) -> str:
        lines = ["BEGIN:VCARD", f"VERSION:{card.version}"]

        if card.uid is not None:
            lines.append(self._content_line("UID", escape_value(card.uid)))
        if card.fn is not None:
            lines.append(self._content_line("FN", escape_value(card.fn)))
        if card.n is not None:
            lines.append(self._content_line("N", self._join(card.n, ";")))
        if card.title is not None:
            lines.append(self._content_line("TITLE", escape_value(card.title)))
        if card.org:
            lines.append(self._content_line("ORG", self._join(card.org, ";")))
        for email in card.email:
            lines.append(self._content_line("EMAIL", escape_value(email.value), email.type))
        for tel in card.tel:
            lines.append(self._content_line("TEL", escape_value(tel.value), tel.type))
        for adr in card.adr:
            lines.append(self._content_line("ADR", self._join(adr.value, ";"), adr.type))
        for url in card.url:
            lines.append(self._content_line("URL", escape_value(url)))
        if card.note is not None:
            lines.append(self._content_line("NOTE", escape_value(card.note)))
        if card.categories:
            lines.append(self._content_line("CATEGORIES", self._join(card.categories, ",")))

        lines.append("END:VCARD")
        return CRLF.join(lines) + CRLF

    @staticmethod
    def _join(components: List[str], separator: str) -> str:
        return separator.join(escape_value(component) for component in components)

    @staticmethod
    def _content_line(name: str, value: str, type_: Optional[str] = None) -> str:
        if type_ is not None:
            if any(char in type_ for char in ";:,"):
                type_ = f'"{type_}"'
            return f"{name};TYPE={type_}:{value}"
        return f"{name}:{value}"


def parse_vcard(text: str, strict: bool = False) -> List[VCard]:
    """Parse vCard text into records, skipping malformed ones unless `strict`."""
    return VCardParser().to_vcards(text, strict=strict)


def stringify_vcard(cards: List[VCard]) -> str:
    """Serialize records to vCard 4.0 text."""
    return VCardParser().to_vcf(cards)
