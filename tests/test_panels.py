from __future__ import annotations

from domain.records.models import RecordType
from reporting.panels import render_processor_listing, render_store_listing, render_store_stats


def test_store_stats_panel(store) -> None:
    store.save("hello", "greet", RecordType.CONVERSATION, 3)
    store.save("evolved", "evolution", RecordType.EVOLUTION, 10)
    text = render_store_stats(store.stats())
    assert "Total Memories: 2/10" in text
    assert "  - Conversation: 1" in text
    assert "  - Evolution: 1" in text
    assert "Learned Fact" not in text
    assert "Memory Usage: 20.0%" in text


def test_store_listing_panel(store) -> None:
    store.save("hello there", "greet", RecordType.LEARNED_FACT, 4)
    store.recall_by_tag("greet")
    text = render_store_listing(store.records())
    assert "ALL MEMORIES (1)" in text
    assert "[0] greet (Learned Fact)" in text
    assert "accessed 1 times, importance 4" in text
    assert '"hello there"' in text


def test_processor_listing_panel(default_registry) -> None:
    default_registry.deactivate("LearningCore")
    text = render_processor_listing(default_registry.processors(), default_registry.stats())
    assert "LOADED PLUGINS (4)" in text
    assert "Active: 3 | Total Loaded: 4" in text
    assert "[1] EmotionEngine (Emotion) - ACTIVE" in text
    assert "[3] LearningCore (Learning) - inactive" in text
    assert "Priority: 2" in text
