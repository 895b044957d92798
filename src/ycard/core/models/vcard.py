"""vCard 4.0 wire record model."""

from typing import Annotated, List, Literal, Optional

from pydantic import AfterValidator, BaseModel, Field

from .validators import pad_components

N_COMPONENTS = 5
ADR_COMPONENTS = 7


class VCardValue(BaseModel):
    """A repeatable single-valued property such as EMAIL or TEL."""

    value: str
    type: Optional[str] = None


class VCardAddress(BaseModel):
    """An ADR property.

    Components are, in order: post office box, extended address, street,
    locality, region, postal code, country.
    """

    value: Annotated[List[str], AfterValidator(pad_components(ADR_COMPONENTS))] = Field(
        default_factory=lambda: [""] * ADR_COMPONENTS
    )
    type: Optional[str] = None


class VCard(BaseModel):
    """One contact record in vCard 4.0 form, restricted to the recognized properties."""

    version: Literal["4.0"] = "4.0"
    uid: Optional[str] = None
    fn: Optional[str] = Field(None, description="Formatted full name.")
    n: Optional[Annotated[List[str], AfterValidator(pad_components(N_COMPONENTS))]] = Field(
        None,
        description="Name components: family, given, additional, prefixes, suffixes.",
    )
    title: Optional[str] = None
    org: List[str] = Field(
        default_factory=list, description="Organization name followed by unit names."
    )
    email: List[VCardValue] = Field(default_factory=list)
    tel: List[VCardValue] = Field(default_factory=list)
    adr: List[VCardAddress] = Field(default_factory=list)
    url: List[str] = Field(default_factory=list)
    note: Optional[str] = None
    categories: List[str] = Field(default_factory=list)

    def is_empty(self) -> bool:
        """True when nothing but the version is set."""
        return self == VCard()
