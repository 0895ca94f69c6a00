"""Card contracts: the mutable store entry and its flat snapshot row.

- `Card`      : a pydantic v2 model kept by the card store. Assignments are
  validated, so the error count can never go negative.
- `CardRecord`: an immutable ``(term, definition, error_count)`` triple, the
  shape of one snapshot line.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

ErrorCount = Annotated[int, Field(ge=0, description="Incorrect quiz answers so far")]


class Card(BaseModel):
    """A term/definition pair with its running count of wrong answers."""

    model_config = ConfigDict(validate_assignment=True)

    term: str = Field(min_length=1, description="Unique key within the store")
    definition: str
    error_count: ErrorCount = 0

    def to_record(self) -> CardRecord:
        """Return the flat snapshot row for this card."""
        return CardRecord(self.term, self.definition, self.error_count)


@dataclass(frozen=True, slots=True)
class CardRecord:
    """
    Immutable snapshot row.

    Attributes
    ----------
    term : str
        The card's key.
    definition : str
        The expected answer.
    error_count : int
        Number of misses recorded at snapshot time.
    """

    term: str
    definition: str
    error_count: int


__all__ = ["Card", "CardRecord", "ErrorCount"]
