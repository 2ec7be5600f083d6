"""Processor registry domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional

from .capabilities import Capability

MAX_NAME_LENGTH = 63
MAX_DESCRIPTION_LENGTH = 255
MAX_PROCESSORS = 10

InitHook = Callable[[], bool]
TeardownHook = Callable[[], None]


class ProcessorType(str, Enum):
    PERSONALITY = "personality"
    LANGUAGE = "language"
    EMOTION = "emotion"
    LEARNING = "learning"
    CREATIVITY = "creativity"
    ANALYSIS = "analysis"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(slots=True)
class Processor:
    name: str
    description: str
    type: ProcessorType
    capability: Capability
    priority: int
    is_active: bool = False
    init_hook: Optional[InitHook] = None
    teardown_hook: Optional[TeardownHook] = None
    data: Any = None

    def process(self, text: str | None) -> Optional[str]:
        return self.capability.process(text)


@dataclass(slots=True)
class RegistryStats:
    count: int = 0
    active_count: int = 0
    total_loaded: int = 0


@dataclass(slots=True)
class RosterEntry:
    name: str
    description: str
    type: ProcessorType
    active: bool = True


@dataclass
class Roster:
    entries: List[RosterEntry] = field(default_factory=list)

    def names(self) -> List[str]:
        return [e.name for e in self.entries]
