"""Loading and dumping yCard documents (YAML, or JSON as a YAML subset)."""

import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import IssueKind, MalformedDocumentError, ValidationIssue
from ..models import YCard

_LOGGER = logging.getLogger(__name__)


def load_document(text: str) -> Any:
    """Load yCard text into plain nested data.

    Raises:
        MalformedDocumentError: If the text is not valid YAML.
    """
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        message = f"YAML parsing error: {e}"
        raise MalformedDocumentError(
            message,
            ValidationIssue(kind=IssueKind.MALFORMED_DOCUMENT, message=message),
        ) from e


def dump_document(document: YCard, file_path: Optional[str | Path] = None) -> str:
    """Dump a document to YAML, and optionally save it to a file.

    Unset fields are left out and keys are sorted so output is stable.
    """
    text = yaml.safe_dump(
        document.to_dict(),
        indent=2,
        sort_keys=True,
        allow_unicode=True,
        default_flow_style=False,
        width=float("inf"),
    )
    if file_path is not None:
        Path(file_path).write_text(text, encoding="utf-8")
        _LOGGER.debug("Wrote %d people to %s", len(document), file_path)
    return text
