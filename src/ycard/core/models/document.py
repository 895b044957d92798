"""Document-level collection of people."""

from typing import Any, Dict, List

from pydantic import BaseModel, Field

from .person import Person


class YCard(BaseModel):
    """A yCard document: the list of people it describes, in document order."""

    people: List[Person] = Field(default_factory=list)

    def __iter__(self):
        return iter(self.people)

    def __len__(self):
        return len(self.people)

    def __getitem__(self, index):
        return self.people[index]

    def uids(self) -> List[str]:
        return [person.uid for person in self.people]

    def find(self, uid: str) -> List[Person]:
        """Return every person carrying `uid` (more than one if uids are duplicated)."""
        return [person for person in self.people if person.uid == uid]

    def to_dict(self) -> Dict[str, Any]:
        """Plain-data form of the document with unset fields left out."""
        return self.model_dump(mode="json", exclude_none=True)
