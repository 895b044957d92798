"""Person data model for yCard documents."""

from typing import Annotated, Dict, List, Optional, Tuple, Union

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Discriminator,
    Field,
    Tag,
)

from .validators import email_kind, phone_kind, to_list, to_str

Text = Annotated[str, BeforeValidator(to_str)]


class Address(BaseModel):
    """A postal address. Every component is optional."""

    model_config = ConfigDict(frozen=True)

    street: Optional[Text] = None
    city: Optional[Text] = None
    state: Optional[Text] = None
    postal_code: Optional[Text] = None
    country: Optional[Text] = None

    def is_empty(self) -> bool:
        return self == Address()


class TypedPhone(BaseModel):
    """A phone number with a usage type such as 'work', 'home' or 'cell'."""

    model_config = ConfigDict(frozen=True)

    type: Text = "work"
    number: Text


Phone = Annotated[
    Union[
        Annotated[Text, Tag("bare")],
        Annotated[TypedPhone, Tag("typed")],
    ],
    Discriminator(phone_kind),
]

Email = Annotated[
    Union[
        Annotated[str, Tag("single")],
        Annotated[Tuple[str, ...], Tag("many")],
    ],
    Discriminator(email_kind),
]


class Job(BaseModel):
    """One of the concurrent roles ("hats") held by a person.

    A job has no identity of its own; it is addressed by its position in the
    owning person's `jobs` list.
    """

    model_config = ConfigDict(frozen=True)

    role: Optional[Text] = Field(None, description="Job title for this role.")
    fte: float = Field(1, ge=0, le=1, description="Full-time-equivalent allocation.")
    manager: Optional[Text] = Field(None, description="uid of the manager for this role.")
    dotted: Annotated[Tuple[Text, ...], BeforeValidator(to_list)] = Field(
        (), description="uids of dotted-line managers."
    )
    org_unit: Optional[Text] = None
    org: Optional[Text] = None
    primary: bool = False


class Person(BaseModel):
    """A canonical person entry.

    Only canonical field names exist on this model; aliases are resolved by
    `ycard.core.normalizer` before construction. Sequences are stored as tuples,
    so a person cannot change once built.
    """

    model_config = ConfigDict(frozen=True)

    uid: Text = Field(..., min_length=1, description="Identifier unique within a document.")
    name: Optional[Text] = Field(None, description="Given name.")
    surname: Optional[Text] = Field(None, description="Family name.")
    title: Optional[Text] = Field(None, description="Primary job title.")
    email: Optional[Email] = None
    org: Optional[Text] = None
    org_unit: Optional[Text] = None
    manager: Optional[Text] = Field(
        None, description="uid of the primary manager. Not checked for existence."
    )
    phone: Optional[Tuple[Phone, ...]] = None
    address: Optional[Address] = None
    jobs: Optional[Tuple[Job, ...]] = None
    i18n: Optional[Dict[str, Dict[str, str]]] = Field(
        None, description="Translations: field name -> language code -> text."
    )

    @property
    def emails(self) -> List[str]:
        """All email addresses as a list, whatever form they were given in."""
        if self.email is None:
            return []
        if isinstance(self.email, str):
            return [self.email]
        return list(self.email)

    @property
    def typed_phones(self) -> List[TypedPhone]:
        """All phone numbers as typed phones; bare numbers default to 'work'."""
        return [
            TypedPhone(number=phone) if isinstance(phone, str) else phone
            for phone in self.phone or []
        ]

    @property
    def full_name(self) -> Optional[str]:
        parts = [part for part in (self.name, self.surname) if part]
        return " ".join(parts) or None

    @property
    def is_multi_hat(self) -> bool:
        return bool(self.jobs) and len(self.jobs) > 1
