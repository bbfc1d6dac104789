"""Data models for prettui."""

from .config import ConfirmConfig, InputConfig, ListConfig, NumberConfig, OutputConfig, RegexConfig
from .items import Item, items_from
from .keys import Key, KeyEvent
from .outcome import Cancelled, Chosen, Outcome, outcome_index

__all__ = [
    "Cancelled",
    "Chosen",
    "ConfirmConfig",
    "InputConfig",
    "Item",
    "Key",
    "KeyEvent",
    "ListConfig",
    "NumberConfig",
    "Outcome",
    "OutputConfig",
    "RegexConfig",
    "items_from",
    "outcome_index",
]
