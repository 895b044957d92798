"""End-to-end pipelines over yCard documents and vCard text."""

from .conversion import (
    convert_file,
    convert_vcard_to_ycard,
    convert_ycard_to_vcard,
    parse_ycard,
    vcf_to_ycard,
    ycard_to_vcf,
)
from .diagnostics import Diagnostic, collect_diagnostics

__all__ = [
    "convert_file",
    "convert_vcard_to_ycard",
    "convert_ycard_to_vcard",
    "parse_ycard",
    "vcf_to_ycard",
    "ycard_to_vcf",
    "Diagnostic",
    "collect_diagnostics",
]
