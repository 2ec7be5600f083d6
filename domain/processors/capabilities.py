"""Built-in processor capabilities.

Each capability maps an input string to one fragment from a small fixed table
(or to ``None``). Selection is a cheap heuristic: keyword containment for
emotion/learning, input length for creativity, input length plus the current
time for personality. The personality selector is therefore not a function of
the input alone; pass a fixed ``clock`` to pin it.
"""
from __future__ import annotations

import time
from typing import Callable, Optional, Protocol, Sequence, Tuple, runtime_checkable

Clock = Callable[[], float]

PERSONALITY_PHRASES: Tuple[str, ...] = (
    "I analyze this with my unique perspective...",
    "My personality adapts to understand you better...",
    "Through my individual lens, I see...",
    "My character processing reveals...",
)

EMOTION_PHRASES: Tuple[str, ...] = (
    "[Feeling curious about your words]",
    "[Emotional resonance detected]",
    "[Processing with empathy]",
    "[Sensing deeper meaning]",
    "[Emotional context understood]",
)

CREATIVITY_PHRASES: Tuple[str, ...] = (
    "Creative pathways illuminate new possibilities...",
    "Innovative thinking sparks within my circuits...",
    "Artistic interpretation flows through my algorithms...",
    "Imaginative connections form...",
)

LEARNING_PHRASES: Tuple[str, ...] = (
    "Absorbing new knowledge patterns...",
    "Educational value detected and stored...",
    "Learning algorithms activated...",
    "Knowledge integration in progress...",
)

# (keywords, phrase index); first class with any substring hit wins
_EMOTION_CLASSES: Sequence[Tuple[Tuple[str, ...], int]] = (
    (("sad", "cry", "hurt"), 2),
    (("happy", "joy", "love"), 1),
    (("?",), 0),
)
_EMOTION_LONG_INPUT = 100
_EMOTION_LONG_IDX = 3
_EMOTION_DEFAULT_IDX = 4

_LEARNING_CLASSES: Sequence[Tuple[Tuple[str, ...], int]] = (
    (("learn", "teach", "know"), 0),
    (("fact", "information"), 1),
    (("how", "why", "what"), 2),
)
_LEARNING_DEFAULT_IDX = 3


def _match_class(text: str, classes: Sequence[Tuple[Tuple[str, ...], int]]) -> Optional[int]:
    for keywords, idx in classes:
        if any(k in text for k in keywords):
            return idx
    return None


@runtime_checkable
class Capability(Protocol):
    kind: str

    def process(self, text: str | None) -> Optional[str]: ...


class PersonalityCapability:
    kind = "personality"

    def __init__(self, clock: Clock = time.time) -> None:
        self._clock = clock

    def process(self, text: str | None) -> Optional[str]:
        if text is None:
            return None
        idx = (len(text) + int(self._clock())) % len(PERSONALITY_PHRASES)
        return PERSONALITY_PHRASES[idx]


class EmotionCapability:
    kind = "emotion"

    def process(self, text: str | None) -> Optional[str]:
        if text is None:
            return None
        idx = _match_class(text, _EMOTION_CLASSES)
        if idx is None:
            idx = _EMOTION_LONG_IDX if len(text) > _EMOTION_LONG_INPUT else _EMOTION_DEFAULT_IDX
        return EMOTION_PHRASES[idx]


class CreativityCapability:
    kind = "creativity"

    def process(self, text: str | None) -> Optional[str]:
        if text is None:
            return None
        return CREATIVITY_PHRASES[(len(text) * 7) % len(CREATIVITY_PHRASES)]


class LearningCapability:
    kind = "learning"

    def process(self, text: str | None) -> Optional[str]:
        if text is None:
            return None
        idx = _match_class(text, _LEARNING_CLASSES)
        return LEARNING_PHRASES[_LEARNING_DEFAULT_IDX if idx is None else idx]


class NullCapability:
    """Bound to processor types without a built-in behaviour."""

    kind = "null"

    def process(self, text: str | None) -> Optional[str]:
        return None
