"""Item model: a display label tied to its position in the caller's sequence."""

from dataclasses import dataclass
from typing import Iterable, List


@dataclass(frozen=True)
class Item:
    """One selectable entry. index is 0-based and never changes."""
    index: int
    label: str

    @property
    def number(self) -> int:
        """1-based position shown to the user and typed to jump here."""
        return self.index + 1


def items_from(values: Iterable[object]) -> List[Item]:
    """Build Items from any iterable, labelling each with str(value)."""
    return [Item(i, str(v)) for i, v in enumerate(values)]
