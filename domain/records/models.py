"""Record store domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict

MAX_TEXT_LENGTH = 511
MAX_TAG_LENGTH = 63
INITIAL_CAPACITY = 10


class RecordType(str, Enum):
    CONVERSATION = "conversation"
    LEARNED_FACT = "learned_fact"
    EMOTIONAL_STATE = "emotional_state"
    PATTERN = "pattern"
    EVOLUTION = "evolution"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    RecordType.CONVERSATION: "Conversation",
    RecordType.LEARNED_FACT: "Learned Fact",
    RecordType.EMOTIONAL_STATE: "Emotional State",
    RecordType.PATTERN: "Pattern",
    RecordType.EVOLUTION: "Evolution",
}


@dataclass(slots=True)
class Record:
    text: str
    tag: str
    type: RecordType
    timestamp: float
    importance: int = 0
    access_count: int = 0

    def preview(self, width: int = 50) -> str:
        if len(self.text) > width:
            return self.text[:width] + "..."
        return self.text


@dataclass(slots=True)
class StoreStats:
    count: int = 0
    capacity: int = 0
    total_saved: int = 0
    total_recalled: int = 0
    by_type: Dict[RecordType, int] = field(default_factory=dict)

    @property
    def usage_percent(self) -> float:
        if self.capacity == 0:
            return 0.0
        return self.count / self.capacity * 100.0
