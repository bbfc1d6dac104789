"""Terminal results of a chooser interaction."""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Chosen:
    index: int


@dataclass(frozen=True)
class Cancelled:
    pass


Outcome = Union[Chosen, Cancelled]


def outcome_index(outcome: Outcome) -> Optional[int]:
    """Chosen -> its index, Cancelled -> None."""
    return outcome.index if isinstance(outcome, Chosen) else None
